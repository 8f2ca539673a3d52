"""Task ORM — the single persisted entity.

Invariants:
    - id is an autoincrementing integer primary key, immutable after insert
    - title is non-nullable text
    - status is "pending" or "completed", "pending" on insert
    - due_date is free text, stored verbatim
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.core.domain_types import TaskStatus
from todo_api.db.base import Base


class Task(Base):
    """One to-do item."""
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default=TaskStatus.PENDING.value,
    )
    due_date: Mapped[str | None] = mapped_column(Text, nullable=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "due_date": self.due_date,
        }
