"""User service functions for registration and authentication."""
from __future__ import annotations

import logging

from postboard.core.security import PasswordHasher, SessionSigner
from postboard.db.store import JsonStore, next_id
from postboard.models.user import User
from postboard.schemas.auth import TokenClaims
from postboard.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UsernameTakenError(ValueError):
    """Raised when registering a username that already exists."""


class InvalidCredentialsError(ValueError):
    """Raised when a username/password pair does not match a stored user."""


def get_user_by_username(db: JsonStore, username: str) -> User | None:
    for record in db.users.read():
        if record["username"] == username:
            return User.model_validate(record)
    return None


def create_user(db: JsonStore, user_in: UserCreate, hasher: PasswordHasher) -> User:
    password_hash = hasher.hash(user_in.password)
    with db.users.update() as records:
        if any(record["username"] == user_in.username for record in records):
            raise UsernameTakenError("Username already exists")
        user = User(
            id=next_id(records),
            username=user_in.username,
            password_hash=password_hash,
            role=user_in.role,
        )
        records.append(user.model_dump(by_alias=True))
    logger.info("Registered user %s (id=%s, role=%s)", user.username, user.id, user.role)
    return user


def authenticate_user(db: JsonStore, username: str, password: str, hasher: PasswordHasher) -> User:
    user = get_user_by_username(db, username)
    if user is None:
        hasher.dummy_verify()
    if user is None or not hasher.verify(password, user.password_hash):
        logger.warning("Failed login attempt for username %s", username)
        raise InvalidCredentialsError("Invalid credentials")
    return user


def issue_token(user: User, signer: SessionSigner) -> str:
    logger.info("Issued session token for user %s", user.id)
    return signer.dumps({"id": user.id, "role": user.role})


def verify_token(token: str, signer: SessionSigner) -> TokenClaims:
    """Decode a session token into its claims.

    Raises ``ValueError`` when the token is malformed, forged or expired.
    """

    payload = signer.loads(token)
    return TokenClaims.model_validate(payload)
