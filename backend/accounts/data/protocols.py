"""Contracts the add-account use case depends on."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from backend.accounts.presentation.protocols import AccountModel, AddAccountModel


@runtime_checkable
class Encrypter(Protocol):
    def encrypt(self, value: str) -> str:
        ...


@runtime_checkable
class AddAccountRepository(Protocol):
    def add(self, account_data: AddAccountModel) -> AccountModel:
        ...
