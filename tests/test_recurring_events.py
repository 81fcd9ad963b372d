"""
Tests for the duration-bounded recurrence forecast.
"""

import copy
from datetime import datetime

import pytest

from taskcal.calendar_api.data_models import DisplayEvent, EventResource, TaskStatus
from taskcal.calendar_api.recurring_events import (
    MAX_FORECAST_OCCURRENCES,
    generate_recurring_events,
)


def _event(start, end, status=TaskStatus.IN_PROGRESS, interval=7, event_id="t"):
    return DisplayEvent(
        id=event_id,
        title="Weekly report",
        start=start,
        end=end,
        resource=EventResource(
            task_id=event_id,
            status=status,
            priority=7,
            is_started=True,
            is_completed=status == TaskStatus.COMPLETED,
            is_overdue=False,
            created_at=datetime(2025, 10, 1),
            recurring_interval=interval,
            department_name="Engineering",
            assignees=("user-1",),
            tags=("report",),
        ),
    )


@pytest.fixture
def week_event():
    return _event(datetime(2025, 10, 20), datetime(2025, 10, 27))


class TestNonRecurring:
    @pytest.mark.parametrize("interval", [None, 0, -7])
    def test_returns_base_event_only(self, week_event, interval):
        assert generate_recurring_events(week_event, interval) == [week_event]

    def test_completed_event_is_never_forecast(self):
        completed = _event(datetime(2025, 10, 1), datetime(2026, 10, 1), status=TaskStatus.COMPLETED)
        for interval in (1, 7, 30):
            result = generate_recurring_events(completed, interval)
            assert len(result) == 1
            assert result[0] is completed

    def test_max_occurrences_zero_returns_nothing(self, week_event):
        assert generate_recurring_events(week_event, 7, max_occurrences=0) == []
        assert generate_recurring_events(week_event, None, max_occurrences=0) == []

    def test_other_max_occurrences_values_are_ignored(self, week_event):
        assert generate_recurring_events(week_event, 7, max_occurrences=12) == generate_recurring_events(week_event, 7)
        assert len(generate_recurring_events(week_event, 7, max_occurrences=1)) == 2


class TestDurationBound:
    def test_week_long_task_weekly_interval(self, week_event):
        events = generate_recurring_events(week_event, 7)

        assert [(e.id, e.start, e.end) for e in events] == [
            ("t", datetime(2025, 10, 20), datetime(2025, 10, 27)),
            ("t-recur-1", datetime(2025, 10, 27), datetime(2025, 11, 3)),
        ]

    def test_interval_longer_than_task_yields_single_event(self, week_event):
        events = generate_recurring_events(week_event, 90)
        assert events == [week_event]

    def test_longer_tasks_get_more_forecasts(self):
        month_event = _event(datetime(2025, 10, 1), datetime(2025, 10, 31))
        events = generate_recurring_events(month_event, 7)
        # starts on Oct 1, 8, 15, 22, 29; Nov 5 passes the Oct 31 end
        assert [e.start.day for e in events] == [1, 8, 15, 22, 29]
        assert [e.id for e in events] == ["t", "t-recur-1", "t-recur-2", "t-recur-3", "t-recur-4"]

    def test_bound_uses_original_end(self):
        event = _event(datetime(2025, 10, 1), datetime(2025, 10, 3))
        events = generate_recurring_events(event, 1)
        # each shifted end moves too, but only the original end (Oct 3) bounds the starts
        assert [e.start.day for e in events] == [1, 2, 3]

    def test_year_boundary(self):
        event = _event(datetime(2025, 12, 31), datetime(2026, 1, 7))
        events = generate_recurring_events(event, 7)
        assert events[1].start == datetime(2026, 1, 7)
        assert events[1].end == datetime(2026, 1, 14)

    def test_month_boundary_keeps_time_of_day(self):
        event = _event(datetime(2025, 1, 30, 14, 15), datetime(2025, 3, 30, 14, 15))
        events = generate_recurring_events(event, 30)
        assert events[1].start == datetime(2025, 3, 1, 14, 15)
        # the next candidate (Mar 31) passes the original Mar 30 end
        assert len(events) == 2

    def test_safety_cap(self):
        event = _event(datetime(2020, 1, 1), datetime(2025, 1, 1))
        events = generate_recurring_events(event, 1)
        assert len(events) == MAX_FORECAST_OCCURRENCES
        assert events[-1].id == f"t-recur-{MAX_FORECAST_OCCURRENCES - 1}"


class TestOccurrenceContent:
    def test_resource_preserved_across_occurrences(self):
        event = _event(datetime(2025, 10, 1), datetime(2025, 10, 31))
        events = generate_recurring_events(event, 7)
        for occurrence in events:
            assert occurrence.resource == event.resource
            assert occurrence.title == event.title

    def test_forecasts_get_fresh_resource_objects(self):
        event = _event(datetime(2025, 10, 1), datetime(2025, 10, 31))
        events = generate_recurring_events(event, 7)
        assert all(e.resource is not event.resource for e in events)

    def test_base_event_not_mutated(self, week_event):
        before = copy.deepcopy(week_event)
        generate_recurring_events(week_event, 7)
        assert week_event == before
