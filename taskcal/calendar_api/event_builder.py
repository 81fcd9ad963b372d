"""Turn a task collection into the flat list of events shown on the calendar."""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from .data_models import DisplayEvent, Task, TaskStatus
from .recurring_events import generate_recurring_events
from .task_to_event import task_to_event

logger = logging.getLogger(__name__)


def build_calendar_events(tasks: Iterable[Task], now: Optional[datetime] = None) -> List[DisplayEvent]:
    """
    Project every task and expand its recurring forecasts.

    Input order is preserved; a task's forecasts follow it in occurrence order.
    """
    if now is None:
        now = datetime.now()

    events: List[DisplayEvent] = []
    task_count = 0
    for task in tasks:
        task_count += 1
        base_event = task_to_event(task, now=now)
        events.extend(generate_recurring_events(base_event, task.recurring_interval))

    logger.debug("Built %d calendar events from %d tasks", len(events), task_count)
    return events


def _sort_key(event: DisplayEvent):
    return (
        event.resource.status == TaskStatus.COMPLETED,
        event.end,
        -event.resource.priority,
        event.title.lower(),
    )


def sort_events(events: Iterable[DisplayEvent]) -> List[DisplayEvent]:
    """
    Order events for display:
    completed last, then earliest end first, then highest priority, then title.
    """
    return sorted(events, key=_sort_key)
