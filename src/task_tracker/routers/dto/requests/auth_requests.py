"""
Request DTOs for authentication endpoints.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request to create an account."""

    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=320)
    password: str = Field(..., max_length=128)


class LoginRequest(BaseModel):
    """Request to exchange credentials for a token."""

    email: str
    password: str
