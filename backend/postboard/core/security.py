"""Security helpers for password hashing and session token signing."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from .config import Settings


class PasswordHasher:
    """Hash and verify user passwords using Argon2id."""

    def __init__(self, rounds: int = 3) -> None:
        self._context = CryptContext(schemes=["argon2"], deprecated="auto", argon2__rounds=rounds)

    @classmethod
    def from_settings(cls, settings: Settings) -> PasswordHasher:
        return cls(rounds=settings.password_hash_rounds)

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        return self._context.verify(password, hashed)

    def dummy_verify(self) -> None:
        """Spend the same time as a real verification when there is no hash to check."""
        self._context.dummy_verify()


class SessionSigner:
    """Sign and verify short-lived JWT session tokens."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.lifetime = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> SessionSigner:
        return cls(
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
            expire_minutes=settings.access_token_expire_minutes,
        )

    def dumps(self, data: dict[str, Any], issued_at: datetime | None = None) -> str:
        issued_at = issued_at or datetime.now(timezone.utc)
        payload = {**data, "iat": issued_at, "exp": issued_at + self.lifetime}
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def loads(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except jwt.InvalidTokenError as exc:
            raise ValueError("Invalid or expired session token") from exc
