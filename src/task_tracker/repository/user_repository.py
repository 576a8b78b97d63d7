"""
SQLAlchemy implementation of IUserRepository.
"""

from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ..shared.utils.types import UserId
from .entities.user import User
from .interfaces import IUserRepository
from .models.user_model import UserModel


class UserRepository(IUserRepository):
    """SQLAlchemy implementation of user repository."""

    def create(self, db: DBSession, user: User) -> User:
        model = UserModel(
            id=user.id,
            email=user.email,
            name=user.name,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        db.add(model)
        db.flush()
        return self._model_to_entity(model)

    def find_by_email(self, db: DBSession, email: str) -> Optional[User]:
        model = db.query(UserModel).filter(UserModel.email == email).first()
        return self._model_to_entity(model) if model else None

    def find_by_id(self, db: DBSession, user_id: UserId) -> Optional[User]:
        model = db.query(UserModel).filter(UserModel.id == user_id).first()
        return self._model_to_entity(model) if model else None

    def _model_to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            name=model.name,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )
