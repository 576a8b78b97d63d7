"""
SQLAlchemy model for user accounts.
"""

from sqlalchemy import BigInteger, Column, Index, String

from .base import Base


class UserModel(Base):
    """SQLAlchemy model for users."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    email = Column(String, nullable=False)
    name = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(BigInteger, nullable=False)  # Epoch timestamp in milliseconds

    __table_args__ = (Index("ix_users_email", "email", unique=True),)
