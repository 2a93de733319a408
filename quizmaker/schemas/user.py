"""Pydantic schemas for users, sessions and auth results."""
import re
from datetime import datetime

from pydantic import Field, field_validator

from quizmaker.schemas.base import CamelSchema

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"

# bcrypt hard limit (UTF-8 bytes)
MAX_PASSWORD_BYTES = 72


class UserSchema(CamelSchema):
    """Public view of a user; there is deliberately no password hash field."""

    id: str
    first_name: str
    last_name: str
    username: str
    email: str
    created_at: datetime
    updated_at: datetime


class UserCreateSchema(CamelSchema):
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    username: str = Field(min_length=3, max_length=30, pattern=USERNAME_PATTERN)
    email: str = Field(min_length=1, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=8)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not (re.search(r"[a-zA-Z]", value) and re.search(r"\d", value)):
            raise ValueError("Password must contain at least one letter and one number")
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginSchema(CamelSchema):
    username_or_email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserSessionSchema(CamelSchema):
    id: str
    user_id: str
    session_token: str
    expires_at: datetime
    created_at: datetime


class AuthResultSchema(CamelSchema):
    user: UserSchema
    session_token: str
