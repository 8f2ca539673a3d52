"""SQL Task Repository — TaskRepository implementation over an AsyncSession.

Invariants:
    - One statement per operation, committed before returning
    - Returns plain dict records (Task.to_dict), never ORM instances
    - Missing rows yield None / False; callers decide whether that is an error
    - SQLAlchemy failures surface as DatabaseError after rollback
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.domain_types import TaskId, TaskStatus
from todo_api.core.task_rules import merge_task_changes
from todo_api.infrastructure.database import translate_db_errors
from todo_api.models.task import Task

logger = logging.getLogger(__name__)


class SqlTaskRepository:
    """Task persistence backed by the `tasks` table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def add(
        self, title: str, description: str | None, due_date: str | None,
    ) -> dict:
        task = Task(
            title=title,
            description=description,
            status=TaskStatus.PENDING.value,
            due_date=due_date,
        )
        async with translate_db_errors(self._db, "insert"):
            self._db.add(task)
            await self._db.commit()
            await self._db.refresh(task)
        return task.to_dict()

    async def list_all(self) -> list[dict]:
        async with translate_db_errors(self._db, "select"):
            result = await self._db.execute(select(Task).order_by(Task.id))
            return [t.to_dict() for t in result.scalars().all()]

    async def get(self, task_id: TaskId) -> dict | None:
        task = await self._get_row(task_id)
        return task.to_dict() if task else None

    async def update(self, task_id: TaskId, changes: dict) -> dict | None:
        task = await self._get_row(task_id)
        if task is None:
            return None
        merged = merge_task_changes(task.to_dict(), changes)
        async with translate_db_errors(self._db, "update"):
            await self._db.execute(
                update(Task).where(Task.id == task_id).values(
                    title=merged["title"],
                    description=merged["description"],
                    status=merged["status"],
                    due_date=merged["due_date"],
                ),
            )
            await self._db.commit()
        return merged

    async def delete(self, task_id: TaskId) -> bool:
        async with translate_db_errors(self._db, "delete"):
            result = await self._db.execute(
                delete(Task).where(Task.id == task_id),
            )
            await self._db.commit()
        return result.rowcount > 0

    async def mark_completed(self, task_id: TaskId) -> dict | None:
        task = await self._get_row(task_id)
        if task is None:
            return None
        async with translate_db_errors(self._db, "update"):
            await self._db.execute(
                update(Task).where(Task.id == task_id).values(
                    status=TaskStatus.COMPLETED.value,
                ),
            )
            await self._db.commit()
        return {**task.to_dict(), "status": TaskStatus.COMPLETED.value}

    async def _get_row(self, task_id: TaskId) -> Task | None:
        async with translate_db_errors(self._db, "select"):
            result = await self._db.execute(
                select(Task).where(Task.id == task_id),
            )
            return result.scalar_one_or_none()
