"""Account creation backed by a repository.

Hashes the password before the account reaches storage. Errors from the
encrypter or the repository propagate to the caller.
"""
from __future__ import annotations

import dataclasses

from backend.accounts.data.protocols import AddAccountRepository, Encrypter
from backend.accounts.presentation.protocols import AccountModel, AddAccountModel


class DbAddAccount:
    def __init__(self, encrypter: Encrypter, add_account_repository: AddAccountRepository):
        self.encrypter = encrypter
        self.add_account_repository = add_account_repository

    def add(self, account_data: AddAccountModel) -> AccountModel:
        hashed_password = self.encrypter.encrypt(account_data.password)
        return self.add_account_repository.add(
            dataclasses.replace(account_data, password=hashed_password)
        )
