"""
Filtering of task collections before they are projected onto the calendar.
"""

from typing import List, Optional, Sequence

from .data_models import Task


def _department_name(task: Task) -> Optional[str]:
    return task.department.name if task.department else None


def list_departments(tasks: Sequence[Task]) -> List[str]:
    """Return the sorted, unique department names found on the tasks."""
    names = {_department_name(t) for t in tasks}
    return sorted(name for name in names if name)


def filter_by_department(tasks: Sequence[Task], department_name: Optional[str] = None) -> List[Task]:
    """
    Return the tasks belonging to `department_name`.
    An empty filter keeps every task.
    """
    if not department_name:
        return list(tasks)
    return [t for t in tasks if _department_name(t) == department_name]
