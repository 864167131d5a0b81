from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from devconnector.core.validation import FieldCheck, is_email, is_present, min_length

PASSWORD_MIN_LENGTH = 6


class UserRegister(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


REGISTER_CHECKS = [
    FieldCheck("name", "Name is required"),
    FieldCheck("email", "Please include a valid email", is_email),
    FieldCheck(
        "password",
        f"Please enter a password with {PASSWORD_MIN_LENGTH} or more characters",
        min_length(PASSWORD_MIN_LENGTH),
    ),
]

LOGIN_CHECKS = [
    FieldCheck("email", "Please include a valid email", is_email),
    FieldCheck("password", "Password is required", is_present),
]


class TokenResponse(BaseModel):
    token: str


class UserResponse(BaseModel):
    """Stored user without the password hash"""
    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    date: datetime = Field(validation_alias="created_at")

    class Config:
        from_attributes = True
