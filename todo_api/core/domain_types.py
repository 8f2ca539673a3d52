"""Domain Types — identity and status types for the task entity.

Invariants:
    - TaskId wraps the store-generated integer key, never a bare str
    - Every valid status is a TaskStatus member; the DB column stores .value
"""

from enum import Enum
from typing import NewType


TaskId = NewType("TaskId", int)


class TaskStatus(str, Enum):
    """Task lifecycle states — maps to DB `status` column."""
    PENDING = "pending"
    COMPLETED = "completed"


TASK_FIELDS = ("title", "description", "status", "due_date")
