"""Stored representation of posts and their comments."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    comment: str


class Post(BaseModel):
    """A text post owned by a user, with a like counter and comment thread."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    content: str
    likes: int = Field(default=0, ge=0)
    comments: list[Comment] = Field(default_factory=list)
    timestamp: datetime
