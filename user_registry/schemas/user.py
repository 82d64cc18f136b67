# File: user_registry/schemas/user.py

from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    name: str
    email: str


class LoginRequest(BaseModel):
    email: str


class UserRecord(BaseModel):
    name: str
    email: str


class ApiResponse(BaseModel):
    """The envelope returned by /register and /login."""

    message: str
    name: Optional[str] = None
    email: Optional[str] = None
    status: str
