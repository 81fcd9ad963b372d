"""
Agenda view model: a chronological list of upcoming due dates.

The agenda covers today through `range_days` days ahead, plus everything
whose due day has already passed. Each date in the range gets an entry,
even when nothing is due that day.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Iterable, List

from .data_models import DisplayEvent
from .utils import add_days, day_of, start_of_day

DEFAULT_AGENDA_DAYS = 30
WEEK_DAYS = 7
MONTH_DAYS = 30


@dataclass
class Agenda:
    today: date
    range_end: date
    overdue: List[DisplayEvent] = field(default_factory=list)
    days: Dict[date, List[DisplayEvent]] = field(default_factory=OrderedDict)
    due_today: int = 0
    due_this_week: int = 0
    due_this_month: int = 0

    @property
    def overdue_count(self) -> int:
        return len(self.overdue)


def _within(value: datetime, start: datetime, end: datetime) -> bool:
    return start <= value <= end


def build_agenda(events: Iterable[DisplayEvent], now: datetime, range_days: int = DEFAULT_AGENDA_DAYS) -> Agenda:
    """Group events by due day and count what is due soon."""
    start_of_today = start_of_day(now)
    range_end = add_days(start_of_today, range_days)
    today = start_of_today.date()

    agenda = Agenda(today=today, range_end=range_end.date())
    for offset in range(range_days + 1):
        agenda.days[add_days(start_of_today, offset).date()] = []

    for event in events:
        end_day = day_of(event.end, start_of_today)
        if end_day < today:
            agenda.overdue.append(event)
            continue
        if end_day > agenda.range_end:
            continue

        agenda.days[end_day].append(event)
        if end_day == today:
            agenda.due_today += 1
        if _within(event.end, start_of_today, add_days(start_of_today, WEEK_DAYS)):
            agenda.due_this_week += 1
        if _within(event.end, start_of_today, add_days(start_of_today, MONTH_DAYS)):
            agenda.due_this_month += 1

    return agenda
