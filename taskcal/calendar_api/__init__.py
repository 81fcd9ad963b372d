"""
Calendar display engine.
Projects tasks onto calendar intervals and forecasts recurring occurrences.
"""

from .data_models import (
    Assignment,
    AssigneeDetail,
    Department,
    DisplayEvent,
    EventResource,
    Person,
    Task,
    TaskStatus,
)
from .task_to_event import task_to_event
from .recurring_events import generate_recurring_events, MAX_FORECAST_OCCURRENCES
from .event_builder import build_calendar_events, sort_events
from .agenda import Agenda, build_agenda
from .day_board import DayBoard, build_day_board

__all__ = [
    'Agenda',
    'Assignment',
    'AssigneeDetail',
    'DayBoard',
    'Department',
    'DisplayEvent',
    'EventResource',
    'MAX_FORECAST_OCCURRENCES',
    'Person',
    'Task',
    'TaskStatus',
    'build_agenda',
    'build_calendar_events',
    'build_day_board',
    'generate_recurring_events',
    'sort_events',
    'task_to_event',
]
