"""Task Queries — `tasks` and `task(id)`.

Invariants:
    - tasks returns every row ordered by id (no pagination)
    - task(id) raises ResourceNotFoundError for a missing row
"""

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from todo_api.core.errors import ResourceNotFoundError
from todo_api.core.task_rules import parse_task_id
from todo_api.graphql.types import TaskType

logger = logging.getLogger(__name__)


async def resolve_tasks(info: Info) -> list[TaskType]:
    """List all tasks."""
    records = await info.context.repository.list_all()
    logger.info(f"Retrieved {len(records)} tasks", extra={"operation": "tasks"})
    return [TaskType.from_record(r) for r in records]


async def resolve_task(
    info: Info,
    task_id: Annotated[strawberry.ID, strawberry.argument(name="id")],
) -> TaskType:
    """Fetch a single task by id."""
    tid = parse_task_id(task_id)
    record = await info.context.repository.get(tid)
    if record is None:
        raise ResourceNotFoundError("Task", str(tid))
    logger.info(
        f"Retrieved task {tid}, due date: {record['due_date']}",
        extra={"task_id": str(tid), "operation": "task"},
    )
    return TaskType.from_record(record)
