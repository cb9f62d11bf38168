"""Request/response envelopes and the collaborator contracts used by controllers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Mapping, Optional, Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class HttpRequest:
    body: Optional[Mapping[str, Any]] = field(default=None)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Any


@dataclass(frozen=True)
class AddAccountModel:
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class AccountModel:
    id: str
    name: str
    email: str
    password: str


@runtime_checkable
class EmailValidator(Protocol):
    def is_valid(self, email: str) -> Union[bool, Awaitable[bool]]:
        ...


@runtime_checkable
class AddAccount(Protocol):
    """Creates and persists an account; may be sync or async."""

    def add(self, account: AddAccountModel) -> Union[AccountModel, Awaitable[AccountModel]]:
        ...


@runtime_checkable
class Controller(Protocol):
    async def handle(self, http_request: HttpRequest) -> HttpResponse:
        ...
