"""Sign-up controller: validates a registration body and creates the account."""
from __future__ import annotations

import inspect
from typing import Any, Mapping

from backend.accounts.presentation.errors import InvalidParamError, MissingParamError
from backend.accounts.presentation.helpers.http_helper import bad_request, ok, server_error
from backend.accounts.presentation.protocols import (
    AddAccount,
    AddAccountModel,
    EmailValidator,
    HttpRequest,
    HttpResponse,
)

REQUIRED_FIELDS = ('name', 'email', 'password', 'passwordConfirmation')


async def _settle(result: Any) -> Any:
    """Await `result` if the collaborator returned an awaitable."""
    if inspect.isawaitable(result):
        return await result
    return result


class SignUpController:
    def __init__(self, email_validator: EmailValidator, add_account: AddAccount):
        self._email_validator = email_validator
        self._add_account = add_account

    async def handle(self, http_request: HttpRequest) -> HttpResponse:
        """Validate the sign-up body and create the account.

        Checks run in a fixed order and the first failure is returned:
        missing fields (in REQUIRED_FIELDS order), password confirmation,
        then email validity. Any exception raised by a collaborator,
        whether synchronously or from an awaitable, becomes a 500.
        """
        body = http_request.body
        if not isinstance(body, Mapping):
            body = {}

        for field in REQUIRED_FIELDS:
            if not body.get(field):
                return bad_request(MissingParamError(field))

        name = body['name']
        email = body['email']
        password = body['password']
        if password != body['passwordConfirmation']:
            return bad_request(InvalidParamError('passwordConfirmation'))

        try:
            is_valid = await _settle(self._email_validator.is_valid(email))
            if not is_valid:
                return bad_request(InvalidParamError('email'))

            account = await _settle(
                self._add_account.add(AddAccountModel(name=name, email=email, password=password))
            )
        except Exception:
            return server_error()

        return ok(account)
