"""Post, like and comment endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from postboard.core.dependencies import get_current_user, get_db
from postboard.db.store import JsonStore, Record
from postboard.schemas.auth import TokenClaims
from postboard.schemas.message import MessageResponse
from postboard.schemas.post import CommentCreate, PostCreate, PostUpdate
from postboard.services import posts as post_service
from postboard.services.posts import PostNotFoundError, PostPermissionError

router = APIRouter(prefix="/posts", tags=["posts"])


def _parse_post_id(post_id: str) -> int:
    # Ids are integers; anything else cannot match a stored post.
    try:
        return int(post_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found") from exc


@router.get("", response_model=list[Record])
def list_posts(db: JsonStore = Depends(get_db)) -> list[Record]:
    return post_service.list_posts(db)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostCreate,
    db: JsonStore = Depends(get_db),
    current_user: TokenClaims = Depends(get_current_user),
) -> MessageResponse:
    try:
        post_service.create_post(db, current_user, payload.content)
    except PostPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return MessageResponse(message="New Post created")


@router.put("/{post_id}", response_model=MessageResponse)
def update_post(
    post_id: str,
    payload: PostUpdate,
    db: JsonStore = Depends(get_db),
    current_user: TokenClaims = Depends(get_current_user),
) -> MessageResponse:
    try:
        post_service.update_post(db, current_user, _parse_post_id(post_id), payload.content)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except PostPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return MessageResponse(message="Post updated")


@router.post("/{post_id}/like", response_model=MessageResponse)
def like_post(
    post_id: str,
    db: JsonStore = Depends(get_db),
    _: TokenClaims = Depends(get_current_user),
) -> MessageResponse:
    try:
        post_service.like_post(db, _parse_post_id(post_id))
    except PostNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MessageResponse(message="Post liked")


@router.post("/{post_id}/comment", response_model=MessageResponse)
def comment_on_post(
    post_id: str,
    payload: CommentCreate,
    db: JsonStore = Depends(get_db),
    current_user: TokenClaims = Depends(get_current_user),
) -> MessageResponse:
    try:
        post_service.add_comment(db, current_user, _parse_post_id(post_id), payload.comment)
    except PostPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except PostNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MessageResponse(message="Comment added")
