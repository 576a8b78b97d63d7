"""
SQLAlchemy model for task records.
"""

from sqlalchemy import BigInteger, Boolean, Column, Date, Index, Integer, String, Text, UniqueConstraint

from .base import Base


class TaskModel(Base):
    """SQLAlchemy model for tasks."""

    __tablename__ = "tasks"

    # Insertion order; breaks created_at ties when listing.
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False)
    user_id = Column(String, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(String(16), nullable=False, default="medium")
    due_date = Column(Date, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(BigInteger, nullable=False)  # Epoch timestamp in milliseconds
    updated_at = Column(BigInteger, nullable=False)  # Epoch timestamp in milliseconds

    __table_args__ = (
        UniqueConstraint("id", name="uq_tasks_id"),
        Index("ix_tasks_user_id", "user_id"),
        Index("ix_tasks_user_id_created_at", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<TaskModel id={self.id} user_id={self.user_id} title={self.title!r}>"
