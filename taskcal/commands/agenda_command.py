from rich.console import Console

from ..calendar_api.agenda import Agenda, build_agenda
from ..calendar_api.calendar_helpers import get_original_task_id
from ..calendar_api.data_models import DisplayEvent
from ..utils.config import get_settings
from .common import build_events_for_args, resolve_now


def _plural(count: int) -> str:
    return "task" if count == 1 else "tasks"


def _event_line(event: DisplayEvent) -> str:
    res = event.resource
    status = res.status.value.replace("_", " ")
    return f"  • {event.title} [{status}, priority {res.priority}] (ID: {get_original_task_id(event.id)})"


def print_agenda(agenda: Agenda, console: Console) -> None:
    console.print(
        f"Overdue: {agenda.overdue_count} | Due today: {agenda.due_today} | "
        f"This week: {agenda.due_this_week} | This month: {agenda.due_this_month}",
        highlight=False,
    )

    if agenda.overdue:
        console.print(
            f"\n[bold red]OVERDUE[/bold red] {agenda.overdue_count} {_plural(agenda.overdue_count)}"
        )
        for event in agenda.overdue:
            console.print(_event_line(event), highlight=False, markup=False)

    for day, events in agenda.days.items():
        header = "Today" if day == agenda.today else day.strftime("%a %Y-%m-%d")
        console.print(f"\n[bold]{header}[/bold]")
        if not events:
            console.print("  No tasks due", style="dim")
            continue
        for event in events:
            console.print(_event_line(event), highlight=False, markup=False)


def handle_agenda(args):
    """
    Show overdue tasks and the tasks due over the coming days.
    """
    now = resolve_now(getattr(args, 'today', None))
    days = getattr(args, 'days', None) or get_settings().agenda_days
    events = build_events_for_args(args, now)
    agenda = build_agenda(events, now, range_days=days)
    print_agenda(agenda, Console())
