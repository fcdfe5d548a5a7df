"""Pydantic schemas for authentication flows."""
from __future__ import annotations

from pydantic import BaseModel, field_validator

MAX_PASSWORD_LEN = 72  # bcrypt limit


class Credentials(BaseModel):
    username: str
    password: str

    @field_validator("password")
    @classmethod
    def password_length_guard(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_LEN:
            raise ValueError(f"password must be <= {MAX_PASSWORD_LEN} bytes for bcrypt")
        return v


class Token(BaseModel):
    token: str
