"""Builders for the three response classes a controller can produce."""
from __future__ import annotations

from typing import Any

from backend.accounts.presentation.errors import HttpError, ServerError
from backend.accounts.presentation.protocols import HttpResponse


def bad_request(error: HttpError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError())


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)
