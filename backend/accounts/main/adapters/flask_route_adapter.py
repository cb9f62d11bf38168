"""Bridge between Flask requests and controllers.

Controllers are transport agnostic; this module builds the `HttpRequest`
from the JSON body, drives the async `handle` to completion and turns the
`HttpResponse` into a JSON Flask response.
"""
from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Any

from flask import jsonify, request

from backend.accounts.presentation.errors import HttpError, ServerError
from backend.accounts.presentation.protocols import Controller, HttpRequest

logger = logging.getLogger(__name__)


def _serialize_body(body: Any) -> Any:
    if isinstance(body, HttpError):
        return body.to_dict()
    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        return dataclasses.asdict(body)
    return body


def adapt_route(controller: Controller):
    """Run `controller` against the current Flask request."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    http_response = asyncio.run(controller.handle(HttpRequest(body=data)))

    if isinstance(http_response.body, ServerError):
        logger.error(
            "%s %s failed with an internal error",
            request.method,
            request.path,
        )
    elif http_response.status_code >= 400:
        logger.info(
            "%s %s rejected: %s",
            request.method,
            request.path,
            getattr(http_response.body, 'message', http_response.body),
        )

    return jsonify(_serialize_body(http_response.body)), http_response.status_code
