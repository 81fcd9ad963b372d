import json
from typing import List

from rich.console import Console
from rich.table import Table

from ..calendar_api.calendar_helpers import is_forecast_occurrence, priority_label
from ..calendar_api.data_models import DisplayEvent
from ..utils.logger import get_logger
from .common import build_events_for_args, resolve_now

log = get_logger(__name__)


def _flags(event: DisplayEvent) -> str:
    res = event.resource
    flags = []
    if res.is_overdue:
        flags.append("overdue")
    if is_forecast_occurrence(event):
        flags.append("forecast")
    elif res.recurring_interval and res.recurring_interval > 0:
        flags.append("recurring")
    if res.parent_task_id:
        flags.append("subtask")
    return ", ".join(flags)


def render_events_table(events: List[DisplayEvent]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="cyan")
    table.add_column("Task", style="green")
    table.add_column("Start", style="yellow")
    table.add_column("End", style="yellow")
    table.add_column("Status", style="magenta")
    table.add_column("Priority")
    table.add_column("Flags", style="red")

    for event in events:
        res = event.resource
        table.add_row(
            event.id,
            event.title,
            event.start.strftime("%Y-%m-%d"),
            event.end.strftime("%Y-%m-%d"),
            res.status.value.replace("_", " "),
            f"{priority_label(res.priority)} ({res.priority})",
            _flags(event),
        )
    return table


def handle_events(args):
    """
    Show the calendar events (tasks plus recurring forecasts) in display order.
    """
    now = resolve_now(getattr(args, 'today', None))
    events = build_events_for_args(args, now)
    log.debug("Rendering %d events for %s", len(events), now.date())

    if getattr(args, 'json', False):
        print(json.dumps([e.to_dict() for e in events], indent=2))
        return

    if not events:
        print("No tasks to display.")
        return

    console = Console()
    console.print(render_events_table(events))
    print(f"\n{len(events)} calendar events")
