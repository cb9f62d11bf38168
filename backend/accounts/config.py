"""Configuration settings and environment variables.

This module loads values from environment variables (including a .env file)
and provides small helpers to safely parse integers and booleans while
stripping inline comments, so a value such as:

    BCRYPT_ROUNDS=12 # cost factor

does not crash startup. The helpers fall back to defaults and emit
warnings when parsing fails.
"""

import os
import logging
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

_logger = logging.getLogger(__name__)


def _strip_inline_comment(val: Optional[str]) -> str:
    """Strip an inline comment from a string and trim whitespace/quotes.

    Example: "12 # cost factor" -> "12"
    """
    if val is None:
        return ''
    val = val.split('#', 1)[0]
    val = val.strip()
    if (val.startswith('"') and val.endswith('"')) or (
        val.startswith("'") and val.endswith("'")
    ):
        val = val[1:-1]
    return val


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None:
        return default
    stripped = _strip_inline_comment(raw)
    return stripped if stripped != '' else default


def _get_int_env(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except (ValueError, TypeError):
        _logger.warning("Invalid integer for %s: %r, falling back to %s", name, raw, default)
        return default


def _get_bool_env(name: str, default: bool) -> bool:
    raw = _get_env(name)
    if raw is None:
        return default
    return raw.lower() in ['true', '1', 'on', 'yes']


class Config:
    """Base configuration class with default settings."""

    SECRET_KEY = _get_env('SECRET_KEY') or 'dev-secret-key-change-in-production'
    LOG_LEVEL = _get_env('LOG_LEVEL', 'INFO')

    # MongoDB settings
    MONGO_URI = _get_env('MONGO_URI') or 'mongodb://localhost:27017/'
    MONGO_DB = _get_env('MONGO_DB') or 'accounts_service'
    ACCOUNTS_COLLECTION = _get_env('ACCOUNTS_COLLECTION') or 'accounts'

    # Password hashing cost
    BCRYPT_ROUNDS = _get_int_env('BCRYPT_ROUNDS', 12)

    # Rate limiting
    RATELIMIT_STORAGE_URI = _get_env('RATELIMIT_STORAGE_URI') or 'memory://'
    SIGNUP_RATE_LIMIT = _get_env('SIGNUP_RATE_LIMIT') or '5 per hour'

    # Email validation: MX lookups hit DNS, so they are opt-in
    EMAIL_VALIDATION_CHECK_MX = _get_bool_env('EMAIL_VALIDATION_CHECK_MX', False)
    # None falls back to config/disposable_domains.txt under the working directory
    EMAIL_DISPOSABLE_DOMAINS_FILE = _get_env('EMAIL_DISPOSABLE_DOMAINS_FILE')


class DevelopmentConfig(Config):
    """Development configuration with debug mode enabled."""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration with test database and cheap hashing."""
    TESTING = True
    MONGO_DB = 'accounts_service_test'
    BCRYPT_ROUNDS = 4
    RATELIMIT_ENABLED = False
    EMAIL_VALIDATION_CHECK_MX = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
