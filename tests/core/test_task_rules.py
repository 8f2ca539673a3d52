"""Task Rules — id parsing and change merging, no IO."""

import pytest

from todo_api.core.errors import TaskValidationError
from todo_api.core.task_rules import (
    MAX_TASK_ID, merge_task_changes, parse_task_id,
)

CURRENT = {
    "id": 3,
    "title": "Old",
    "description": "desc",
    "status": "pending",
    "due_date": None,
}


@pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), (" 9 ", 9), (5, 5)])
def test_parse_task_id_accepts_positive_integers(raw, expected):
    assert parse_task_id(raw) == expected


@pytest.mark.parametrize(
    "raw", ["", "abc", "1.5", "0", "-3", "99999999999999999999", str(2**63)],
)
def test_parse_task_id_rejects_invalid(raw):
    with pytest.raises(TaskValidationError) as exc:
        parse_task_id(raw)
    assert exc.value.field == "id"


def test_parse_task_id_accepts_largest_column_value():
    assert parse_task_id(str(MAX_TASK_ID)) == 2**63 - 1


def test_merge_changes_only_supplied_fields():
    merged = merge_task_changes(CURRENT, {"title": "New"})
    assert merged == {**CURRENT, "title": "New"}


def test_merge_empty_changes_is_identity():
    assert merge_task_changes(CURRENT, {}) == CURRENT


def test_merge_explicit_none_clears_field():
    merged = merge_task_changes(CURRENT, {"description": None})
    assert merged["description"] is None
    assert merged["title"] == "Old"


def test_merge_never_changes_id():
    merged = merge_task_changes(CURRENT, {"id": 99, "status": "completed"})
    assert merged["id"] == 3
    assert merged["status"] == "completed"


def test_merge_does_not_mutate_input():
    before = dict(CURRENT)
    merge_task_changes(CURRENT, {"title": "Changed"})
    assert CURRENT == before
