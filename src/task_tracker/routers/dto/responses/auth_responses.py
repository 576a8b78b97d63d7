"""
Authentication response DTOs.
"""

from pydantic import BaseModel

from ....repository.entities.user import User


class UserResponse(BaseModel):
    """Public view of an account (never includes the password hash)."""

    id: str
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)


class LoginResponse(BaseModel):
    """Token issued on successful login."""

    token: str
    user: UserResponse
