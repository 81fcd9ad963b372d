from itertools import zip_longest

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..calendar_api.calendar_helpers import get_original_task_id, is_forecast_occurrence
from ..calendar_api.data_models import DisplayEvent
from ..calendar_api.day_board import BOARD_COLUMNS, DayBoard, build_day_board
from .common import build_events_for_args, resolve_now


def _card(event: DisplayEvent) -> str:
    res = event.resource
    prefix = "↳ " if res.parent_task_id else ""
    marks = []
    if res.is_overdue:
        marks.append("overdue")
    if is_forecast_occurrence(event):
        marks.append("forecast")
    suffix = f" ({', '.join(marks)})" if marks else ""
    return f"{prefix}{event.title} [P{res.priority}] #{get_original_task_id(event.id)}{suffix}"


def render_day_board(board: DayBoard) -> Table:
    table = Table(show_header=True, header_style="bold", title=f"{board.day:%A, %B} {board.day.day}, {board.day.year}")
    for status, label in BOARD_COLUMNS:
        table.add_column(f"{label} ({len(board.columns[status])})")

    cards = [[Text(_card(e)) for e in board.columns[status]] for status, _label in BOARD_COLUMNS]
    if not any(cards):
        table.add_row(*["No tasks"] * len(BOARD_COLUMNS))
    for row in zip_longest(*cards, fillvalue=""):
        table.add_row(*row)
    return table


def handle_day(args):
    """
    Show the tasks touching one day as a status board.
    """
    now = resolve_now(getattr(args, 'today', None))
    day = resolve_now(getattr(args, 'date', None) or getattr(args, 'today', None)).date()
    events = build_events_for_args(args, now)
    board = build_day_board(events, day)

    Console().print(render_day_board(board))
    print(f"\n{board.total} {'task' if board.total == 1 else 'tasks'}")
