"""
Forecasting of future occurrences for recurring tasks.

Forecasts are bounded by the task's own duration: a new occurrence is only
shown while its start does not pass the original task's end. A completed
task is never forecast from, because the task service already creates the
next occurrence as a separate task when one is completed.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from .data_models import DisplayEvent, TaskStatus
from .utils import add_days

logger = logging.getLogger(__name__)

MAX_FORECAST_OCCURRENCES = 100
RECUR_ID_SEPARATOR = "-recur-"


def generate_recurring_events(
    base_event: DisplayEvent,
    recurring_interval: Optional[int],
    max_occurrences: Optional[int] = None,
) -> List[DisplayEvent]:
    """
    Expand a projected event into its forecast occurrences.

    Args:
        base_event: Event produced by task_to_event.
        recurring_interval: Days between occurrences. None, 0 or negative
            means the task does not recur.
        max_occurrences: Legacy limit. 0 yields no events at all; any other
            value is ignored in favour of the duration bound.

    Returns:
        The base event followed by forecasts with ids "{id}-recur-{n}".
    """
    if max_occurrences == 0:
        return []

    if recurring_interval is None or recurring_interval <= 0:
        return [base_event]

    if base_event.resource.status == TaskStatus.COMPLETED:
        return [base_event]

    original_end = base_event.end
    events: List[DisplayEvent] = []

    for i in range(MAX_FORECAST_OCCURRENCES):
        offset = recurring_interval * i
        new_start = add_days(base_event.start, offset)
        if i > 0 and new_start > original_end:
            break
        event_id = base_event.id if i == 0 else f"{base_event.id}{RECUR_ID_SEPARATOR}{i}"
        events.append(
            DisplayEvent(
                id=event_id,
                title=base_event.title,
                start=new_start,
                end=add_days(base_event.end, offset),
                resource=replace(base_event.resource),
            )
        )

    if len(events) == MAX_FORECAST_OCCURRENCES:
        logger.debug("Forecast for %s hit the %d occurrence cap", base_event.id, MAX_FORECAST_OCCURRENCES)
    return events
