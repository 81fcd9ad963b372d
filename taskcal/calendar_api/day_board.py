"""
Day board: the events touching one calendar day, grouped into status columns.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List

from .data_models import DisplayEvent, TaskStatus
from .utils import day_of

BOARD_COLUMNS = (
    (TaskStatus.TO_DO, "To Do"),
    (TaskStatus.IN_PROGRESS, "In Progress"),
    (TaskStatus.BLOCKED, "Blocked"),
    (TaskStatus.COMPLETED, "Completed"),
)


@dataclass
class DayBoard:
    day: date
    columns: Dict[TaskStatus, List[DisplayEvent]] = field(default_factory=OrderedDict)

    @property
    def total(self) -> int:
        return sum(len(events) for events in self.columns.values())


def covers_day(event: DisplayEvent, day: date) -> bool:
    """True when `day` lies between the event's start day and end day, inclusive."""
    start_day = day_of(event.start)
    end_day = day_of(event.end)
    return min(start_day, end_day) <= day <= max(start_day, end_day)


def build_day_board(events: Iterable[DisplayEvent], day: date) -> DayBoard:
    """Group the events covering `day` by status, keeping their input order."""
    board = DayBoard(day=day)
    for status, _label in BOARD_COLUMNS:
        board.columns[status] = []

    for event in events:
        if covers_day(event, day):
            board.columns[event.resource.status].append(event)
    return board
