"""Composition root for the sign-up controller."""
from __future__ import annotations

from typing import Any, Mapping

from backend.accounts.data.usecases.db_add_account import DbAddAccount
from backend.accounts.infra.cryptography.bcrypt_adapter import BcryptAdapter
from backend.accounts.presentation.controllers.signup import SignUpController
from backend.accounts.repositories import AccountMongoRepository
from backend.accounts.utils.email_validator_adapter import EmailValidationService, EmailValidatorAdapter


def make_signup_controller(config: Mapping[str, Any]) -> SignUpController:
    email_validator = EmailValidatorAdapter(
        EmailValidationService(
            disposable_file=config.get('EMAIL_DISPOSABLE_DOMAINS_FILE'),
            check_mx=config.get('EMAIL_VALIDATION_CHECK_MX', False),
        )
    )
    add_account = DbAddAccount(
        BcryptAdapter(rounds=config.get('BCRYPT_ROUNDS', 12)),
        AccountMongoRepository(config.get('ACCOUNTS_COLLECTION', 'accounts')),
    )
    return SignUpController(email_validator, add_account)
