"""Authentication-related schemas."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .user import UserRead


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    # The stored password hash is never echoed back, for existing users either.
    success: bool = True
    user: UserRead
    requires_type_selection: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
