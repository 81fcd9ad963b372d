#!/usr/bin/env python3
from types import SimpleNamespace
from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .exceptions import TaskCalError
from .utils.config import get_settings, load_env_vars
from .utils.logger import configure_logging, get_logger

# Load environment variables
load_env_vars()

log = get_logger(__name__)

app = typer.Typer(
    name="taskcal",
    help="Task Calendar CLI - Project tasks onto a calendar, forecast recurring tasks and export to iCal.",
    no_args_is_help=True,
)

from .commands.events_command import handle_events
from .commands.agenda_command import handle_agenda
from .commands.export_command import handle_export
from .commands.departments_command import handle_departments
from .commands.day_command import handle_day

FILE_HELP = "Path to the task export JSON file (defaults to TASKCAL_TASKS_FILE)."
TODAY_HELP = "Date to treat as today (YYYY-MM-DD or natural language). Defaults to now."
DEPARTMENT_HELP = "Only show tasks of this department."


def _run(handler, **kwargs):
    """Call a command handler, turning taskcal errors into a clean exit."""
    try:
        handler(SimpleNamespace(**kwargs))
    except TaskCalError as e:
        log.debug("Command failed", exc_info=True)
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {e}", highlight=False)
        raise typer.Exit(code=1)


def _version_callback(value: bool):
    if value:
        print(f"taskcal {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    """Task Calendar CLI - Project tasks onto a calendar, forecast recurring tasks and export to iCal."""
    configure_logging(get_settings().log_level)


@app.command("events")
def events(
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    today: Optional[str] = typer.Option(None, "--today", help=TODAY_HELP),
    department: Optional[str] = typer.Option(None, "--department", "-d", help=DEPARTMENT_HELP),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format."),
):
    """List calendar events, including forecast occurrences of recurring tasks."""
    _run(handle_events, file=file, today=today, department=department, json=json_output)


@app.command("agenda")
def agenda(
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    today: Optional[str] = typer.Option(None, "--today", help=TODAY_HELP),
    days: Optional[int] = typer.Option(None, "--days", min=1, help="Number of days to show (defaults to TASKCAL_AGENDA_DAYS)."),
    department: Optional[str] = typer.Option(None, "--department", "-d", help=DEPARTMENT_HELP),
):
    """Show overdue tasks and what is due over the coming days."""
    _run(handle_agenda, file=file, today=today, days=days, department=department)


@app.command("export")
def export(
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    output: str = typer.Option("tasks.ics", "--output", "-o", help="Where to write the .ics file."),
    today: Optional[str] = typer.Option(None, "--today", help=TODAY_HELP),
    department: Optional[str] = typer.Option(None, "--department", "-d", help=DEPARTMENT_HELP),
    name: Optional[str] = typer.Option(None, "--name", help="Calendar name (defaults to TASKCAL_CALENDAR_NAME)."),
):
    """Export calendar events to an iCal (.ics) file."""
    _run(handle_export, file=file, output=output, today=today, department=department, name=name)


@app.command("day")
def day(
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    date: Optional[str] = typer.Option(None, "--date", help="Day to show (YYYY-MM-DD or natural language). Defaults to today."),
    today: Optional[str] = typer.Option(None, "--today", help=TODAY_HELP),
    department: Optional[str] = typer.Option(None, "--department", "-d", help=DEPARTMENT_HELP),
):
    """Show the tasks touching one day, grouped by status."""
    _run(handle_day, file=file, date=date, today=today, department=department)


@app.command("departments")
def departments(
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """List the departments found in the task export."""
    _run(handle_departments, file=file)


if __name__ == "__main__":
    app()
