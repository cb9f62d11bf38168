"""bcrypt-backed password hashing."""
from __future__ import annotations

import bcrypt

DEFAULT_ROUNDS = 12


class BcryptAdapter:
    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def encrypt(self, value: str) -> str:
        return bcrypt.hashpw(value.encode('utf-8'), bcrypt.gensalt(self.rounds)).decode('utf-8')
