"""
API utilities for REST endpoints.

Provides:
- Auth utilities (get_current_user)
"""

from .auth_utils import get_current_user

__all__ = [
    "get_current_user",
]
