"""GraphQL Error Boundary — maps resolver exceptions onto GraphQL errors.

Invariants:
    - TodoError → message kept, extensions gain code/category/severity
    - Any other resolver exception → "An unexpected error occurred", code INTERNAL_ERROR
    - Parse/validation errors (no original_error) pass through untouched
    - Every error is logged once through TodoSchema.process_errors
"""

import logging
from typing import Iterator

import strawberry
from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from todo_api.core.errors import ErrorCategory, ErrorSeverity, TodoError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def format_error(error: GraphQLError) -> GraphQLError:
    """Return the client-facing version of a resolver error."""
    original = error.original_error
    if original is None or isinstance(original, GraphQLError):
        return error
    if isinstance(original, TodoError):
        return GraphQLError(
            original.message,
            nodes=error.nodes,
            source=error.source,
            positions=error.positions,
            path=error.path,
            original_error=original,
            extensions={**(error.extensions or {}), **original.to_extensions()},
        )
    return GraphQLError(
        INTERNAL_ERROR_MESSAGE,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=None,
        extensions={
            "code": "INTERNAL_ERROR",
            "category": ErrorCategory.INTERNAL.value,
            "severity": ErrorSeverity.CRITICAL.value,
        },
    )


class TodoErrorExtension(SchemaExtension):
    """Rewrites result errors after the operation has executed."""

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        errors = getattr(result, "errors", None)
        if errors:
            result.errors = [format_error(e) for e in errors]


class TodoSchema(strawberry.Schema):
    """Schema with structured error logging."""

    def process_errors(self, errors, execution_context=None) -> None:
        for error in errors:
            original = error.original_error
            path = ".".join(str(p) for p in error.path or [])
            if isinstance(original, TodoError):
                logger.warning(
                    f"{original.code} on {path or 'operation'}: {original.message}",
                    extra={
                        "error_code": original.code,
                        "task_id": original.context.task_id,
                        "operation": path or None,
                    },
                )
            elif original is not None and not isinstance(original, GraphQLError):
                logger.error(
                    f"Unhandled resolver error on {path}: {original}",
                    exc_info=original,
                    extra={"error_code": "INTERNAL_ERROR", "operation": path or None},
                )
            else:
                logger.info(f"GraphQL request error: {error.message}")
