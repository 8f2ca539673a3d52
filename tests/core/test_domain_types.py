"""Domain Types — task identity and status enum."""

from todo_api.core.domain_types import TASK_FIELDS, TaskId, TaskStatus


def test_task_id_wraps_int():
    assert TaskId(7) == 7


def test_task_status_has_two_states():
    assert set(TaskStatus) == {TaskStatus.PENDING, TaskStatus.COMPLETED}


def test_status_values_match_column_text():
    assert TaskStatus.PENDING.value == "pending"
    assert TaskStatus.COMPLETED.value == "completed"
    assert TaskStatus("completed") is TaskStatus.COMPLETED


def test_task_fields_exclude_id():
    assert "id" not in TASK_FIELDS
    assert set(TASK_FIELDS) == {"title", "description", "status", "due_date"}
