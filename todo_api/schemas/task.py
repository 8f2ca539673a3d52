"""Task Schemas — Pydantic models with field-level validation for task arguments.

Invariants:
    - title is stripped before its 1-500 char bounds are checked
    - TaskUpdate only reports fields the caller actually supplied
    - Explicit null is rejected for title and status, allowed for description/due_date
      (field validators only run on supplied values, never on defaults)
    - validate_input() is the only place pydantic errors become TaskValidationError
"""

from typing import TypeVar

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from todo_api.core.domain_types import TaskStatus
from todo_api.core.errors import TaskValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _strip_text(v):
    return v.strip() if isinstance(v, str) else v


class TaskCreate(BaseModel):
    """Task creation. Status is not accepted; every new task is pending."""
    title: str = Field(min_length=1, max_length=500)
    description: str | None = Field(None, max_length=10_000)
    due_date: str | None = Field(None, max_length=100)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return _strip_text(v)


class TaskUpdate(BaseModel):
    """Partial task update; unset fields are left untouched."""
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = Field(None, max_length=10_000)
    status: TaskStatus | None = None
    due_date: str | None = Field(None, max_length=100)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return _strip_text(v)

    @field_validator("title", "status")
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller, enum values unwrapped."""
        return self.model_dump(exclude_unset=True, mode="json")


def validate_input(schema: type[SchemaT], data: dict) -> SchemaT:
    """Validate operation arguments, raising TaskValidationError on failure."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "input"
        raise TaskValidationError(first["msg"], field) from e
