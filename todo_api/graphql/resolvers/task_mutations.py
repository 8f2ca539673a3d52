"""Task Mutations — add, update, delete, mark completed.

Invariants:
    - addTask always stores status "pending"; a client-supplied status is not accepted
    - updateTask changes only arguments present in the request (UNSET is skipped)
    - markTaskCompleted sets "completed" regardless of prior status
    - deleteTask returns False when no row matched, never raises for a missing id

Design Decisions:
    - Arguments validated by Pydantic schemas before touching the repository,
      so the store never sees blank titles or unknown statuses
"""

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from todo_api.core.errors import ResourceNotFoundError
from todo_api.core.task_rules import parse_task_id
from todo_api.graphql.types import TaskType
from todo_api.schemas.task import TaskCreate, TaskUpdate, validate_input

logger = logging.getLogger(__name__)

TaskIdArg = Annotated[strawberry.ID, strawberry.argument(name="id")]


async def resolve_add_task(
    info: Info,
    title: str,
    description: str | None = None,
    due_date: str | None = None,
) -> TaskType:
    """Create a pending task."""
    logger.info(
        f"Received addTask request with title: {title}, due date: {due_date}",
        extra={"operation": "addTask"},
    )
    body = validate_input(TaskCreate, {
        "title": title, "description": description, "due_date": due_date,
    })
    record = await info.context.repository.add(
        body.title, body.description, body.due_date,
    )
    logger.info(
        f"Added task {record['id']}",
        extra={"task_id": str(record["id"]), "operation": "addTask"},
    )
    return TaskType.from_record(record)


async def resolve_update_task(
    info: Info,
    task_id: TaskIdArg,
    title: str | None = strawberry.UNSET,
    description: str | None = strawberry.UNSET,
    status: str | None = strawberry.UNSET,
    due_date: str | None = strawberry.UNSET,
) -> TaskType:
    """Apply the supplied fields to an existing task."""
    tid = parse_task_id(task_id)
    supplied = {
        name: value
        for name, value in (
            ("title", title),
            ("description", description),
            ("status", status),
            ("due_date", due_date),
        )
        if value is not strawberry.UNSET
    }
    changes = validate_input(TaskUpdate, supplied).changes()
    record = await info.context.repository.update(tid, changes)
    if record is None:
        raise ResourceNotFoundError("Task", str(tid))
    logger.info(
        f"Updated task {tid} fields: {sorted(changes)}",
        extra={"task_id": str(tid), "operation": "updateTask"},
    )
    return TaskType.from_record(record)


async def resolve_delete_task(info: Info, task_id: TaskIdArg) -> bool:
    """Remove a task; True when a row was deleted."""
    tid = parse_task_id(task_id)
    deleted = await info.context.repository.delete(tid)
    if deleted:
        logger.info(
            f"Deleted task {tid}",
            extra={"task_id": str(tid), "operation": "deleteTask"},
        )
    else:
        logger.info(
            f"Delete requested for missing task {tid}",
            extra={"task_id": str(tid), "operation": "deleteTask"},
        )
    return deleted


async def resolve_mark_task_completed(
    info: Info, task_id: TaskIdArg,
) -> TaskType:
    """Set a task's status to completed."""
    tid = parse_task_id(task_id)
    record = await info.context.repository.mark_completed(tid)
    if record is None:
        raise ResourceNotFoundError("Task", str(tid))
    logger.info(
        f"Marked task {tid} as completed",
        extra={"task_id": str(tid), "operation": "markTaskCompleted"},
    )
    return TaskType.from_record(record)
