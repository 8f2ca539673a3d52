"""Request Context — binds a TaskRepository to each GraphQL request.

Invariants:
    - One AsyncSession per request, obtained through the get_db dependency
    - Tests swap storage by overriding get_db, never by patching resolvers
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from todo_api.core.repository_protocols import TaskRepository
from todo_api.infrastructure.database import get_db
from todo_api.infrastructure.task_repository import SqlTaskRepository


class TaskContext(BaseContext):
    """Per-request context exposed to resolvers as info.context."""

    def __init__(self, repository: TaskRepository):
        super().__init__()
        self.repository = repository


async def get_context(db: AsyncSession = Depends(get_db)) -> TaskContext:
    return TaskContext(SqlTaskRepository(db))
