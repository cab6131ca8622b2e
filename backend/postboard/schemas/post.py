"""Pydantic schemas for post operations."""
from __future__ import annotations

from pydantic import BaseModel


class PostCreate(BaseModel):
    content: str


class PostUpdate(BaseModel):
    content: str


class CommentCreate(BaseModel):
    comment: str
