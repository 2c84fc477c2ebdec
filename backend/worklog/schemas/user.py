"""Pydantic schemas for user operations."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserDirectoryEntry(BaseModel):
    username: str
    name: str | None = None
    role: str
    type: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UserRead(UserDirectoryEntry):
    id: int


class TypeSelection(BaseModel):
    type: str | None = None


class TypeSelectionResponse(BaseModel):
    success: bool = True
    user: UserRead
