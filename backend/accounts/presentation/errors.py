"""Error descriptions returned as HTTP response bodies.

These are exception types so collaborators may raise them, but the
sign-up controller only ever places them in an `HttpResponse` body.
Equality is by type and parameter name, which lets callers compare a
response body against a freshly built error.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class HttpError(Exception):
    code = 'error'

    def __init__(self, message: str, param: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.param = param

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {'error': self.code, 'message': self.message}
        if self.param is not None:
            body['param'] = self.param
        return body

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.param == other.param and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.param, self.message))

    def __repr__(self) -> str:
        if self.param is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.param!r})"


class MissingParamError(HttpError):
    code = 'missing_param'

    def __init__(self, param_name: str):
        super().__init__(f"Missing param: {param_name}", param=param_name)


class InvalidParamError(HttpError):
    code = 'invalid_param'

    def __init__(self, param_name: str):
        super().__init__(f"Invalid param: {param_name}", param=param_name)


class ServerError(HttpError):
    """Generic internal failure; carries no detail about what went wrong."""

    code = 'server_error'

    def __init__(self):
        super().__init__('Internal server error')
