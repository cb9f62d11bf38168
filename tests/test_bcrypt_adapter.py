import bcrypt
import pytest

from backend.accounts.infra.cryptography import bcrypt_adapter
from backend.accounts.infra.cryptography.bcrypt_adapter import BcryptAdapter


def test_encrypt_calls_bcrypt_with_rounds(monkeypatch):
    captured = {}

    def fake_gensalt(rounds):
        captured['rounds'] = rounds
        return b'salt'

    def fake_hashpw(value, salt):
        captured['value'] = value
        captured['salt'] = salt
        return b'hashed_value'

    monkeypatch.setattr(bcrypt_adapter.bcrypt, 'gensalt', fake_gensalt)
    monkeypatch.setattr(bcrypt_adapter.bcrypt, 'hashpw', fake_hashpw)

    result = BcryptAdapter(rounds=10).encrypt('any_value')

    assert result == 'hashed_value'
    assert captured == {'rounds': 10, 'value': b'any_value', 'salt': b'salt'}


def test_encrypt_produces_verifiable_hash():
    hashed = BcryptAdapter(rounds=4).encrypt('any_value')
    assert hashed != 'any_value'
    assert bcrypt.checkpw(b'any_value', hashed.encode('utf-8'))


def test_encrypt_propagates_errors(monkeypatch):
    def failing_hashpw(value, salt):
        raise ValueError('invalid salt')

    monkeypatch.setattr(bcrypt_adapter.bcrypt, 'hashpw', failing_hashpw)
    with pytest.raises(ValueError):
        BcryptAdapter(rounds=4).encrypt('any_value')
