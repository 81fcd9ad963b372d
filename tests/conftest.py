import json
from datetime import datetime
from pathlib import Path

import pytest

from taskcal.calendar_api.data_models import Assignment, Department, Person, Task, TaskStatus


@pytest.fixture
def now():
    """Frozen 'current time' injected into the engine."""
    return datetime(2025, 10, 22, 9, 30)


@pytest.fixture
def make_task():
    """Factory for tasks with sensible defaults."""

    def _make_task(**overrides):
        fields = dict(
            id="t",
            title="Standup",
            status=TaskStatus.TO_DO,
            created_at=datetime(2025, 10, 15, 8, 0),
            due_date=datetime(2025, 10, 27, 10, 0),
            start_date=None,
            recurring_interval=None,
            parent_task_id=None,
            priority=5,
            description="Daily sync",
            owner=Person(id="owner-1", name="John Manager", email="john@example.com"),
            department=Department(id="dept-1", name="Engineering"),
            assignments=[
                Assignment(user_id="user-1", user=Person(id="user-1", name="Alice", email="alice@example.com")),
                Assignment(user_id="user-2", user=Person(id="user-2", name="Bob", email=None)),
            ],
            tags=["urgent", "frontend"],
        )
        fields.update(overrides)
        return Task(**fields)

    return _make_task


def _raw_task(**overrides):
    task = {
        "id": "task-1",
        "title": "Standup",
        "description": "Daily sync",
        "status": "TO_DO",
        "createdAt": "2025-10-15T08:00:00",
        "dueDate": "2025-10-27T10:00:00",
        "startDate": None,
        "priority": 5,
        "recurringInterval": None,
        "parentTaskId": None,
        "owner": {"id": "owner-1", "name": "John Manager", "email": "john@example.com"},
        "department": {"id": "dept-1", "name": "Engineering"},
        "assignments": [
            {"userId": "user-1", "user": {"id": "user-1", "name": "Alice", "email": "alice@example.com"}},
        ],
        "tags": ["urgent"],
    }
    task.update(overrides)
    return task


@pytest.fixture
def raw_task():
    """Factory for task records as found in a JSON export."""
    return _raw_task


@pytest.fixture
def write_export(tmp_path):
    """Write a task export to a temporary JSON file and return its path."""

    def _write(data, name="tasks.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write
