"""Task Rules — pure helpers shared by resolvers and the repository.

Invariants:
    - A task id is a positive integer that fits a signed 64-bit column;
      GraphQL delivers it as a string
    - Merging changes never touches `id`
    - Keys absent from `changes` keep their current value
"""

from todo_api.core.domain_types import TASK_FIELDS, TaskId
from todo_api.core.errors import TaskValidationError

MAX_TASK_ID = 2**63 - 1


def parse_task_id(raw: str | int) -> TaskId:
    """Convert a GraphQL ID to a TaskId or raise TaskValidationError."""
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise TaskValidationError(
            f"Task id must be a positive integer, got '{raw}'", "id",
        )
    if value < 1 or value > MAX_TASK_ID:
        raise TaskValidationError(
            f"Task id must be a positive integer, got '{raw}'", "id",
        )
    return TaskId(value)


def merge_task_changes(current: dict, changes: dict) -> dict:
    """Return a copy of `current` with only the supplied task fields replaced."""
    merged = dict(current)
    for key, value in changes.items():
        if key not in TASK_FIELDS:
            continue
        merged[key] = value
    return merged
