from ..integrations.ical_export import DEFAULT_FILENAME, export_to_ical
from ..utils.config import get_settings
from ..utils.logger import get_logger
from .common import build_events_for_args, resolve_now

log = get_logger(__name__)


def handle_export(args):
    """
    Export the calendar events (including recurring forecasts) to an .ics file.
    """
    settings = get_settings()
    now = resolve_now(getattr(args, 'today', None))
    events = build_events_for_args(args, now)

    output = getattr(args, 'output', None) or DEFAULT_FILENAME
    calendar_name = getattr(args, 'name', None) or settings.calendar_name
    path = export_to_ical(
        events,
        output,
        calendar_name=calendar_name,
        url=settings.calendar_url,
    )
    log.info("Wrote %d events", len(events))
    print(f"Exported {len(events)} events to {path}")
