"""
iCal (.ics) export of calendar display events.

Every event becomes an all-day VEVENT:
  - DUE carries the event end; DTSTART is only written once work has started
  - PRIORITY maps the 1-10 task scale onto iCal's 1-9 (10 -> 1, 1 -> 9)
  - RRULE is FREQ=DAILY with the task's recurrence interval, when it has one
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Union

import icalendar
from icalendar import vCalAddress, vText

from ..calendar_api.calendar_helpers import priority_label
from ..calendar_api.data_models import DisplayEvent, EventResource
from ..exceptions import CalendarExportError

logger = logging.getLogger(__name__)

PRODUCT_ID = "-//taskcal//Task Calendar//EN"
DEFAULT_CALENDAR_NAME = "Task Calendar"
DEFAULT_FILENAME = "tasks.ics"


def map_priority_to_ical(priority: int) -> int:
    """Map a 1-10 task priority (10 = highest) onto iCal's 1-9 (1 = highest)."""
    return max(1, min(9, 10 - priority))


def format_description(resource: EventResource) -> str:
    """Build the human readable DESCRIPTION text of an event."""
    desc = ""

    if resource.description:
        desc += resource.description + "\n\n"

    if resource.owner_name:
        desc += f"Owner: {resource.owner_name}"
        if resource.owner_email:
            desc += f" ({resource.owner_email})"
        desc += "\n"

    if resource.assignee_details:
        names = ", ".join(a.name or a.email or "" for a in resource.assignee_details)
        desc += f"Assigned: {names}\n"

    if resource.department_name:
        desc += f"Department: {resource.department_name}\n"

    if resource.tags:
        desc += "Tags: " + " ".join("#" + t for t in resource.tags) + "\n"

    desc += f"Status: {resource.status.value.replace('_', ' ')}\n"
    desc += f"Priority: {priority_label(resource.priority)} ({resource.priority}/10)\n"

    return desc.strip()


def _valid_categories(tags) -> List[str]:
    return [t.strip() for t in tags if t and t.strip()]


def _calendar_address(email: str, name: Optional[str]) -> vCalAddress:
    address = vCalAddress(f"mailto:{email}")
    address.params["cn"] = vText(name or email)
    return address


def event_to_vevent(event: DisplayEvent, url: Optional[str] = None, stamp: Optional[datetime] = None) -> icalendar.Event:
    res = event.resource
    vevent = icalendar.Event()
    vevent.add("uid", res.task_id)
    vevent.add("dtstamp", stamp or datetime.now(timezone.utc))
    vevent.add("summary", event.title)
    vevent.add("description", format_description(res))
    vevent.add("due", event.end.date())
    if res.is_started:
        vevent.add("dtstart", event.start.date())
    vevent.add("priority", map_priority_to_ical(res.priority))

    if res.department_name:
        vevent.add("location", res.department_name)
    if url:
        vevent.add("url", url)

    if res.owner_email:
        vevent.add("organizer", _calendar_address(res.owner_email, res.owner_name))

    for assignee in res.assignee_details:
        if not assignee.email:
            continue
        attendee = _calendar_address(assignee.email, assignee.name)
        attendee.params["role"] = vText("REQ-PARTICIPANT")
        vevent.add("attendee", attendee)

    categories = _valid_categories(res.tags)
    if categories:
        vevent.add("categories", categories)

    if res.recurring_interval:
        vevent.add("rrule", {"freq": "daily", "interval": res.recurring_interval})

    return vevent


def build_calendar(
    events: Iterable[DisplayEvent],
    calendar_name: str = DEFAULT_CALENDAR_NAME,
    url: Optional[str] = None,
    stamp: Optional[datetime] = None,
) -> icalendar.Calendar:
    """Build a VCALENDAR with one VEVENT per display event."""
    calendar = icalendar.Calendar()
    calendar.add("prodid", PRODUCT_ID)
    calendar.add("version", "2.0")
    calendar.add("x-wr-calname", calendar_name)

    stamp = stamp or datetime.now(timezone.utc)
    count = 0
    for event in events:
        calendar.add_component(event_to_vevent(event, url=url, stamp=stamp))
        count += 1

    logger.debug("Built calendar '%s' with %d events", calendar_name, count)
    return calendar


def to_ical_bytes(events: Iterable[DisplayEvent], **kwargs) -> bytes:
    return build_calendar(events, **kwargs).to_ical()


def export_to_ical(
    events: Iterable[DisplayEvent],
    path: Union[str, Path] = DEFAULT_FILENAME,
    **kwargs,
) -> Path:
    """
    Write the events to an .ics file.

    Raises:
        CalendarExportError: the file could not be written.
    """
    path = Path(path)
    data = to_ical_bytes(events, **kwargs)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise CalendarExportError(f"Could not write calendar to {path}: {e}") from e
    logger.info("Exported calendar to %s", path)
    return path
