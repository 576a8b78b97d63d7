"""
User domain entity.
"""

from pydantic import BaseModel


class User(BaseModel):
    """An account that owns tasks."""

    id: str
    email: str
    name: str
    password_hash: str
    created_at: int
