"""Email validation used at sign-up.

`EmailValidationService` performs the checks and reports a
`ValidationResult`:
- regex format check
- disposable domain check (from a plain-text list, one domain per line)
- optional MX DNS lookup via `dnspython`

`EmailValidatorAdapter` narrows that result to the boolean `is_valid`
contract the sign-up controller consumes.
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Optional

import dns.exception
import dns.resolver

logger = logging.getLogger(__name__)


def default_disposable_file() -> str:
    return os.path.join(os.getcwd(), 'config', 'disposable_domains.txt')


@dataclass
class ValidationResult:
    status: str  # 'valid' or 'invalid'
    reason: Optional[str] = None
    details: dict = field(default_factory=dict)


class EmailValidationService:
    EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    def __init__(self, disposable_file: Optional[str] = None, check_mx: bool = False):
        self.disposable_file = disposable_file or default_disposable_file()
        self.check_mx = check_mx
        self.disposable_domains = self._load_disposable_domains()

    def _load_disposable_domains(self) -> set[str]:
        domains = set()
        if not os.path.exists(self.disposable_file):
            return domains
        try:
            with open(self.disposable_file, 'r', encoding='utf-8') as fh:
                for line in fh:
                    line = line.strip()
                    if not line or line.startswith('#'):
                        continue
                    domains.add(line.lower())
        except OSError as e:
            logger.warning(f"Failed to load disposable domains from {self.disposable_file}: {e}")
        return domains

    def _is_disposable(self, domain: str) -> bool:
        return domain.lower() in self.disposable_domains

    def _mx_lookup(self, domain: str) -> bool:
        """Return True if MX records exist for domain."""
        try:
            answers = dns.resolver.resolve(domain, 'MX', lifetime=5)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer, dns.resolver.NoNameservers):
            return False
        except dns.exception.Timeout:
            logger.warning("MX lookup timed out for %s", domain)
            return False
        return len(answers) > 0

    def validate(self, email: str) -> ValidationResult:
        if email is not None and not isinstance(email, str):
            return ValidationResult('invalid', reason='format', details={'type': type(email).__name__})

        email = (email or '').strip()
        if not email:
            return ValidationResult('invalid', reason='empty')

        if not self.EMAIL_RE.match(email):
            return ValidationResult('invalid', reason='format')

        domain = email.rsplit('@', 1)[1].lower()
        if self._is_disposable(domain):
            return ValidationResult('invalid', reason='disposable_domain', details={'domain': domain})

        if not self.check_mx:
            return ValidationResult('valid', reason='format_ok')

        has_mx = self._mx_lookup(domain)
        if not has_mx:
            return ValidationResult('invalid', reason='no_mx', details={'mx': False})
        return ValidationResult('valid', reason='mx_found', details={'mx': True})


class EmailValidatorAdapter:
    def __init__(self, service: Optional[EmailValidationService] = None):
        self.service = service or EmailValidationService()

    def is_valid(self, email: str) -> bool:
        result = self.service.validate(email)
        if result.status != 'valid':
            logger.debug("Email rejected: reason=%s", result.reason)
        return result.status == 'valid'
