"""Stored representation of application users."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Application user with hashed password and role."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str
    password_hash: str = Field(alias="password")
    role: str = "user"
    followers: list[int] = Field(default_factory=list)
    following: list[int] = Field(default_factory=list)
