"""Boundary Protocols — contract between resolvers and the task store.

Invariants:
    - Resolvers NEVER import SQLAlchemy; they talk to a TaskRepository
    - Records cross the boundary as plain dicts keyed by column name
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Protocol

from todo_api.core.domain_types import TaskId


class TaskRepository(Protocol):
    """Contract for task persistence — implemented by infrastructure."""
    async def add(
        self, title: str, description: str | None, due_date: str | None,
    ) -> dict: ...
    async def list_all(self) -> list[dict]: ...
    async def get(self, task_id: TaskId) -> dict | None: ...
    async def update(self, task_id: TaskId, changes: dict) -> dict | None: ...
    async def delete(self, task_id: TaskId) -> bool: ...
    async def mark_completed(self, task_id: TaskId) -> dict | None: ...
