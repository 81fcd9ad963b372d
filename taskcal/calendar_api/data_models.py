"""
Data models for tasks (input) and calendar display events (output).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple


class TaskStatus(str, Enum):
    TO_DO = "TO_DO"
    IN_PROGRESS = "IN_PROGRESS"
    BLOCKED = "BLOCKED"
    COMPLETED = "COMPLETED"


@dataclass
class Person:
    id: str
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass
class Department:
    id: str
    name: Optional[str] = None


@dataclass
class Assignment:
    user_id: str
    user: Optional[Person] = None


@dataclass
class Task:
    """A task record as supplied by the task service.

    The calendar engine only reads these; it never mutates one.
    """
    id: str
    title: str
    status: TaskStatus
    created_at: datetime
    due_date: datetime
    start_date: Optional[datetime] = None
    recurring_interval: Optional[int] = None
    parent_task_id: Optional[str] = None
    priority: int = 5
    description: Optional[str] = None
    owner: Optional[Person] = None
    department: Optional[Department] = None
    assignments: List[Assignment] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class AssigneeDetail:
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class EventResource:
    """Display attributes carried by every occurrence of a task."""
    task_id: str
    status: TaskStatus
    priority: int
    is_started: bool
    is_completed: bool
    is_overdue: bool
    created_at: datetime
    recurring_interval: Optional[int] = None
    parent_task_id: Optional[str] = None
    description: Optional[str] = None
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    department_id: Optional[str] = None
    department_name: Optional[str] = None
    assignees: Tuple[str, ...] = ()
    assignee_details: Tuple[AssigneeDetail, ...] = ()
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DisplayEvent:
    id: str
    title: str
    start: datetime
    end: datetime
    resource: EventResource

    def to_dict(self):
        res = self.resource
        return {
            "id": self.id,
            "title": self.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "resource": {
                "taskId": res.task_id,
                "status": res.status.value,
                "priority": res.priority,
                "isStarted": res.is_started,
                "isCompleted": res.is_completed,
                "isOverdue": res.is_overdue,
                "createdAt": res.created_at.isoformat(),
                "recurringInterval": res.recurring_interval,
                "parentTaskId": res.parent_task_id,
                "description": res.description,
                "ownerName": res.owner_name,
                "ownerEmail": res.owner_email,
                "departmentId": res.department_id,
                "departmentName": res.department_name,
                "assignees": list(res.assignees),
                "assigneeDetails": [
                    {"name": a.name, "email": a.email} for a in res.assignee_details
                ],
                "tags": list(res.tags),
            },
        }
