"""Helpers shared by the CLI command handlers."""

from datetime import datetime
from typing import List, Optional

import dateparser
from dateutil import tz

from ..calendar_api.data_models import DisplayEvent, Task
from ..calendar_api.event_builder import build_calendar_events, sort_events
from ..calendar_api.search_filters import filter_by_department
from ..calendar_api.utils import to_local
from ..exceptions import TaskCalError
from ..utils.config import get_settings
from ..utils.data_loading import load_tasks


def resolve_now(today: Optional[str] = None) -> datetime:
    """
    Turn the --today option into an aware datetime.
    Accepts YYYY-MM-DD or natural language ("tomorrow", "next friday").
    """
    if not today:
        return datetime.now(tz.tzlocal())
    parsed = dateparser.parse(today)
    if parsed is None:
        raise TaskCalError(f"Could not understand date: {today}")
    return to_local(parsed)


def load_selected_tasks(args) -> List[Task]:
    file = getattr(args, 'file', None) or get_settings().tasks_file
    tasks = load_tasks(file)
    return filter_by_department(tasks, getattr(args, 'department', None))


def build_events_for_args(args, now: datetime) -> List[DisplayEvent]:
    """Load, filter, project and order the events requested on the command line."""
    tasks = load_selected_tasks(args)
    return sort_events(build_calendar_events(tasks, now=now))
