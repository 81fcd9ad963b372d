"""Errors reported to the user by the taskcal CLI."""


class TaskCalError(Exception):
    """Base class for errors raised outside the pure calendar engine."""


class TaskDataError(TaskCalError):
    """The task export could not be read or failed validation."""


class CalendarExportError(TaskCalError):
    """The iCal file could not be written."""
