"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from postboard.core.security import PasswordHasher, SessionSigner
from postboard.db.store import JsonStore
from postboard.schemas.auth import TokenClaims
from postboard.services.users import verify_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_db(request: Request) -> JsonStore:
    return request.app.state.store


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_session_signer(request: Request) -> SessionSigner:
    return request.app.state.session_signer


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    signer: SessionSigner = Depends(get_session_signer),
) -> TokenClaims:
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access denied")

    try:
        return verify_token(credentials.credentials, signer)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid token") from exc
