"""Small helpers shared by the calendar views and the iCal export."""

from .data_models import DisplayEvent
from .recurring_events import RECUR_ID_SEPARATOR

HIGH_PRIORITY_THRESHOLD = 8
MEDIUM_PRIORITY_THRESHOLD = 5


def get_original_task_id(event_id: str) -> str:
    """
    Strip the forecast suffix from an event id.

    "abc123-recur-2" -> "abc123"; ids without the suffix are returned as is.
    """
    return event_id.split(RECUR_ID_SEPARATOR)[0]


def is_forecast_occurrence(event: DisplayEvent) -> bool:
    return RECUR_ID_SEPARATOR in event.id


def priority_label(priority: int) -> str:
    if priority >= HIGH_PRIORITY_THRESHOLD:
        return "High"
    if priority >= MEDIUM_PRIORITY_THRESHOLD:
        return "Medium"
    return "Low"
