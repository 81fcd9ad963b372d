from datetime import datetime, timezone

import pytest

from taskcal.calendar_api.data_models import TaskStatus
from taskcal.exceptions import TaskDataError
from taskcal.utils.data_loading import load_tasks, parse_tasks


def test_load_valid_export(write_export, raw_task):
    path = write_export([raw_task(), raw_task(id="task-2", status="IN_PROGRESS", startDate="2025-10-18T09:00:00")])
    tasks = load_tasks(path)

    assert [t.id for t in tasks] == ["task-1", "task-2"]
    first = tasks[0]
    assert first.title == "Standup"
    assert first.status == TaskStatus.TO_DO
    assert first.start_date is None
    assert first.priority == 5
    assert first.owner.name == "John Manager"
    assert first.department.name == "Engineering"
    assert first.assignments[0].user_id == "user-1"
    assert first.assignments[0].user.email == "alice@example.com"
    assert first.tags == ["urgent"]
    assert tasks[1].start_date is not None


def test_load_wrapped_export(write_export, raw_task):
    path = write_export({"tasks": [raw_task()], "exportedAt": "2025-10-22"})
    assert len(load_tasks(path)) == 1


def test_timestamps_are_local_and_aware(raw_task):
    tasks = parse_tasks([raw_task(createdAt="2025-10-15T08:00:00Z", dueDate="2025-10-27")])
    task = tasks[0]
    assert task.created_at.tzinfo is not None
    assert task.due_date.tzinfo is not None
    assert task.created_at == datetime(2025, 10, 15, 8, 0, tzinfo=timezone.utc)


def test_offsets_are_preserved_as_instants(raw_task):
    tasks = parse_tasks([raw_task(dueDate="2025-10-27T10:00:00+02:00")])
    assert tasks[0].due_date == datetime(2025, 10, 27, 8, 0, tzinfo=timezone.utc)


def test_priority_bucket_alias(raw_task):
    record = raw_task()
    del record["priority"]
    record["priorityBucket"] = 8
    assert parse_tasks([record])[0].priority == 8


def test_null_collections_become_empty(raw_task):
    task = parse_tasks([raw_task(tags=None, assignments=None, owner=None, department=None)])[0]
    assert task.tags == []
    assert task.assignments == []
    assert task.owner is None
    assert task.department is None


def test_recurring_fields(raw_task):
    task = parse_tasks([raw_task(recurringInterval=7, parentTaskId="parent-1")])[0]
    assert task.recurring_interval == 7
    assert task.parent_task_id == "parent-1"


@pytest.mark.parametrize(
    "overrides",
    [
        {"dueDate": "not-a-date"},
        {"createdAt": "2025-13-45"},
        {"status": "DONE"},
        {"dueDate": None},
    ],
)
def test_invalid_task_is_rejected(raw_task, overrides):
    with pytest.raises(TaskDataError, match="task-1"):
        parse_tasks([raw_task(**overrides)])


def test_missing_required_field_is_rejected(raw_task):
    record = raw_task()
    del record["title"]
    with pytest.raises(TaskDataError):
        parse_tasks([record])


def test_record_without_id_is_reported_by_position(raw_task):
    record = raw_task()
    del record["id"]
    with pytest.raises(TaskDataError, match="#1"):
        parse_tasks([raw_task(), record])


def test_load_invalid_export_shape(write_export):
    path = write_export({"badKey": "oops"})
    with pytest.raises(TaskDataError):
        load_tasks(path)


def test_missing_file(tmp_path):
    with pytest.raises(TaskDataError, match="File not found"):
        load_tasks(tmp_path / "nope.json")


def test_undecodable_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(TaskDataError, match="Could not decode JSON"):
        load_tasks(path)
