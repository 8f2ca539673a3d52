"""GraphQL error boundary — domain errors keep their code, others are masked."""

from graphql import GraphQLError

from todo_api.core.errors import ResourceNotFoundError
from todo_api.graphql.errors import INTERNAL_ERROR_MESSAGE, format_error


def _located(original: Exception) -> GraphQLError:
    return GraphQLError(str(original), path=["task"], original_error=original)


def test_domain_error_gets_extensions():
    formatted = format_error(_located(ResourceNotFoundError("Task", "3")))

    assert formatted.message == "Task '3' not found"
    assert formatted.extensions["code"] == "RESOURCE_NOT_FOUND"
    assert formatted.path == ["task"]


def test_unexpected_error_is_masked():
    formatted = format_error(_located(RuntimeError("secret dsn=postgres://u:p@h")))

    assert formatted.message == INTERNAL_ERROR_MESSAGE
    assert formatted.extensions["code"] == "INTERNAL_ERROR"
    assert formatted.original_error is None


def test_request_errors_pass_through():
    error = GraphQLError("Cannot query field 'nope' on type 'Query'.")

    assert format_error(error) is error
