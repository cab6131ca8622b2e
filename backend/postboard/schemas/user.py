"""Pydantic schemas for user operations."""
from __future__ import annotations

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    username: str
    password: str
    role: str = Field(default="user", pattern=r"^[a-zA-Z0-9_\-]+$")
