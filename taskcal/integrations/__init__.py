"""
Integrations that consume calendar display events (iCal export).
"""

from .ical_export import build_calendar, export_to_ical, map_priority_to_ical

__all__ = [
    'build_calendar',
    'export_to_ical',
    'map_priority_to_ical',
]
