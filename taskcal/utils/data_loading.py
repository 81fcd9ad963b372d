"""
Loading of task exports (JSON) into calendar engine Task objects.

Every record is validated before it reaches the engine; timestamps are
normalized to aware datetimes in the local timezone so that day boundaries
match what the user sees on their calendar.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from ..calendar_api.data_models import Assignment, Department, Person, Task
from ..calendar_api.utils import to_local
from ..exceptions import TaskDataError
from .export_schema import PersonModel, TaskModel

logger = logging.getLogger(__name__)


def _person(model: PersonModel) -> Person:
    return Person(id=model.id, name=model.name, email=model.email)


def task_from_model(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        status=model.status,
        created_at=to_local(model.createdAt),
        due_date=to_local(model.dueDate),
        start_date=to_local(model.startDate) if model.startDate else None,
        recurring_interval=model.recurringInterval,
        parent_task_id=model.parentTaskId,
        priority=model.priority,
        description=model.description,
        owner=_person(model.owner) if model.owner else None,
        department=Department(id=model.department.id, name=model.department.name) if model.department else None,
        assignments=[
            Assignment(user_id=a.userId, user=_person(a.user) if a.user else None)
            for a in model.assignments
        ],
        tags=list(model.tags),
    )


def _raw_task_list(raw_data: Any) -> List[Any]:
    if isinstance(raw_data, list):
        return raw_data
    if isinstance(raw_data, dict) and isinstance(raw_data.get("tasks"), list):
        return raw_data["tasks"]
    raise TaskDataError("Task export must be a list of tasks or an object with a 'tasks' list")


def parse_tasks(raw_data: Any) -> List[Task]:
    """
    Validate already-decoded JSON data and convert it to Task objects.

    Raises:
        TaskDataError: a record is malformed (missing field, bad date, unknown status).
    """
    tasks: List[Task] = []
    for index, raw_task in enumerate(_raw_task_list(raw_data)):
        try:
            model = TaskModel.model_validate(raw_task)
        except ValidationError as e:
            task_ref = raw_task.get("id") if isinstance(raw_task, dict) else None
            label = f"task '{task_ref}'" if task_ref else f"task #{index}"
            raise TaskDataError(f"Invalid {label}: {e}") from e
        tasks.append(task_from_model(model))
    return tasks


def load_tasks(json_file_path: Union[str, Path]) -> List[Task]:
    """
    Load and validate tasks from a JSON export file.

    Raises:
        TaskDataError: the file is missing, is not valid JSON, or holds invalid tasks.
    """
    try:
        with open(json_file_path, "r", encoding="utf-8") as f:
            raw_data: Union[List[Any], Dict[str, Any]] = json.load(f)
    except FileNotFoundError as e:
        raise TaskDataError(f"File not found at {json_file_path}") from e
    except json.JSONDecodeError as e:
        raise TaskDataError(f"Could not decode JSON from {json_file_path}: {e}") from e

    tasks = parse_tasks(raw_data)
    logger.debug("Loaded %d tasks from %s", len(tasks), json_file_path)
    return tasks
