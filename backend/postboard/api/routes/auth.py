"""Registration and login endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from postboard.core.dependencies import get_db, get_password_hasher, get_session_signer
from postboard.core.security import PasswordHasher, SessionSigner
from postboard.db.store import JsonStore
from postboard.schemas.auth import LoginRequest, TokenResponse
from postboard.schemas.message import MessageResponse
from postboard.schemas.user import UserCreate
from postboard.services.users import (
    InvalidCredentialsError,
    UsernameTakenError,
    authenticate_user,
    create_user,
    issue_token,
)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    payload: UserCreate,
    db: JsonStore = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> MessageResponse:
    try:
        create_user(db, payload, hasher)
    except UsernameTakenError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    db: JsonStore = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    signer: SessionSigner = Depends(get_session_signer),
) -> TokenResponse:
    try:
        user = authenticate_user(db, payload.username, payload.password, hasher)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return TokenResponse(token=issue_token(user, signer))
