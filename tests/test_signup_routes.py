"""Tests for the sign-up HTTP route.

A bare Flask app registers the blueprint and a fake controller is stored
on `app.extensions`, so no database is touched.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import pytest
from flask import Flask

from backend.accounts.blueprints.api.signup.routes import signup_bp
from backend.accounts.extensions import limiter
from backend.accounts.presentation.errors import InvalidParamError, MissingParamError
from backend.accounts.presentation.helpers.http_helper import bad_request, ok, server_error
from backend.accounts.presentation.protocols import AccountModel, HttpRequest, HttpResponse


class FakeController:
    def __init__(self, response: HttpResponse):
        self.response = response
        self.requests: List[HttpRequest] = []

    async def handle(self, http_request: HttpRequest) -> HttpResponse:
        self.requests.append(http_request)
        return self.response


@pytest.fixture(name="app")
def fixture_app() -> Flask:
    app = Flask(__name__)
    app.config.update(TESTING=True, RATELIMIT_ENABLED=False)
    limiter.init_app(app)
    app.register_blueprint(signup_bp, url_prefix="/api")
    return app


@pytest.fixture(name="client")
def fixture_client(app: Flask):
    return app.test_client()


def _use_controller(app: Flask, response: HttpResponse) -> FakeController:
    controller = FakeController(response)
    app.extensions['signup_controller'] = controller
    return controller


def test_signup_success_serializes_account(app: Flask, client) -> None:
    account = AccountModel(id='valid_id', name='valid_name', email='valid_email@mail.com', password='hashed')
    controller = _use_controller(app, ok(account))
    payload: Dict[str, Any] = {
        'name': 'valid_name',
        'email': 'valid_email@mail.com',
        'password': 'valid_password',
        'passwordConfirmation': 'valid_password',
    }

    response = client.post('/api/signup', json=payload)

    assert response.status_code == 200
    assert response.get_json() == {
        'id': 'valid_id',
        'name': 'valid_name',
        'email': 'valid_email@mail.com',
        'password': 'hashed',
    }
    assert controller.requests[0].body == payload


def test_signup_missing_param(app: Flask, client) -> None:
    _use_controller(app, bad_request(MissingParamError('name')))

    response = client.post('/api/signup', json={})

    assert response.status_code == 400
    assert response.get_json() == {'error': 'missing_param', 'message': 'Missing param: name', 'param': 'name'}


def test_signup_invalid_param(app: Flask, client) -> None:
    _use_controller(app, bad_request(InvalidParamError('email')))

    response = client.post('/api/signup', json={'email': 'bad'})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'invalid_param'
    assert response.get_json()['param'] == 'email'


def test_signup_server_error_is_generic_and_logged(app: Flask, client, caplog) -> None:
    _use_controller(app, server_error())

    with caplog.at_level(logging.ERROR, logger='backend.accounts.main.adapters.flask_route_adapter'):
        response = client.post('/api/signup', json={'name': 'x'})

    assert response.status_code == 500
    assert response.get_json() == {'error': 'server_error', 'message': 'Internal server error'}
    assert any(
        record.levelno == logging.ERROR and 'internal error' in record.getMessage()
        for record in caplog.records
    )


@pytest.mark.parametrize('data, content_type', [
    ('not json', 'text/plain'),
    ('[1, 2, 3]', 'application/json'),
])
def test_signup_non_object_body_becomes_empty(app: Flask, client, data, content_type) -> None:
    controller = _use_controller(app, bad_request(MissingParamError('name')))

    response = client.post('/api/signup', data=data, content_type=content_type)

    assert response.status_code == 400
    assert controller.requests[0].body == {}


def test_signup_rejects_get(client) -> None:
    response = client.get('/api/signup')
    assert response.status_code == 405
