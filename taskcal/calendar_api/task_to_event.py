"""Task to calendar event projection."""

from datetime import datetime
from typing import Optional

from .data_models import AssigneeDetail, DisplayEvent, EventResource, Task, TaskStatus
from .utils import is_before_day


def task_to_event(task: Task, now: Optional[datetime] = None) -> DisplayEvent:
    """
    Project a task onto a single calendar interval.

    Args:
        task: The task to display. Never modified.
        now: Current time used for the overdue check. Defaults to the local
            clock; pass it explicitly for repeatable results.

    Returns:
        A DisplayEvent whose start/end are chosen as follows:
          - late start (started after the due date): due date -> start date,
            overdue unless completed
          - otherwise: start date (or creation date if not started) -> due date,
            overdue when the due day is before today and the task is not completed
    """
    if now is None:
        now = datetime.now()

    is_completed = task.status == TaskStatus.COMPLETED
    has_started = task.start_date is not None

    if has_started and task.start_date > task.due_date:
        start = task.due_date
        end = task.start_date
        is_overdue = not is_completed
    else:
        start = task.start_date if has_started else task.created_at
        end = task.due_date
        is_overdue = is_before_day(task.due_date, now) and not is_completed

    owner = task.owner
    department = task.department
    assignee_details = tuple(
        AssigneeDetail(name=a.user.name, email=a.user.email)
        for a in task.assignments
        if a.user is not None
    )

    resource = EventResource(
        task_id=task.id,
        status=task.status,
        priority=task.priority,
        is_started=has_started,
        is_completed=is_completed,
        is_overdue=is_overdue,
        created_at=task.created_at,
        recurring_interval=task.recurring_interval,
        parent_task_id=task.parent_task_id,
        description=task.description,
        owner_name=owner.name if owner else None,
        owner_email=owner.email if owner else None,
        department_id=department.id if department else None,
        department_name=department.name if department else None,
        assignees=tuple(a.user_id for a in task.assignments),
        assignee_details=assignee_details,
        tags=tuple(task.tags),
    )

    return DisplayEvent(
        id=task.id,
        title=task.title,
        start=start,
        end=end,
        resource=resource,
    )
