"""
Service layer for account registration and login.
"""

import logging
import uuid
from typing import Optional

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DBSession

from ..repository.entities.user import User
from ..repository.interfaces import IUserRepository
from ..shared.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from ..shared.utils import now_epoch_ms
from ..shared.utils.types import UserId
from .token_service import TokenService

log = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    """Hash a password for storage."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its stored hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class AuthService:
    """Registers accounts and exchanges credentials for access tokens."""

    def __init__(self, user_repository: IUserRepository, token_service: TokenService):
        self.user_repository = user_repository
        self.token_service = token_service

    def register(self, db: DBSession, name: str, email: str, password: str) -> User:
        """Create a new account."""
        clean_name = (name or "").strip()
        clean_email = normalize_email(email)

        errors: dict[str, list[str]] = {}
        if not clean_name:
            errors["name"] = ["Name is required"]
        if not self._is_valid_email(clean_email):
            errors["email"] = ["A valid email is required"]
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            errors["password"] = [
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            ]
        if errors:
            raise ValidationError("Invalid registration data", validation_details=errors)

        if self.user_repository.find_by_email(db, clean_email):
            raise DuplicateEntityError("User", "email")

        user = User(
            id=str(uuid.uuid4()),
            email=clean_email,
            name=clean_name,
            password_hash=hash_password(password),
            created_at=now_epoch_ms(),
        )
        try:
            saved = self.user_repository.create(db, user)
        except IntegrityError:
            # Concurrent registration with the same email won the unique index.
            raise DuplicateEntityError("User", "email")
        log.info("Registered user %s", saved.id)
        return saved

    def login(self, db: DBSession, email: str, password: str) -> tuple[str, User]:
        """
        Check credentials and issue a token.

        Unknown email and wrong password fail the same way.
        """
        user = self.user_repository.find_by_email(db, normalize_email(email))
        if user is None or not verify_password(password or "", user.password_hash):
            log.warning("Failed login attempt")
            raise UnauthenticatedError("Invalid email or password")

        token = self.token_service.issue(user.id)
        log.info("User %s logged in", user.id)
        return token, user

    def get_user(self, db: DBSession, user_id: UserId) -> User:
        """Look up the account behind a verified token."""
        user = self.user_repository.find_by_id(db, user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    @staticmethod
    def _is_valid_email(email: str) -> bool:
        local, sep, domain = email.partition("@")
        return bool(sep) and bool(local) and bool(domain) and "@" not in domain
