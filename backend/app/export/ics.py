"""iCalendar (RFC 5545) export of a trip plan."""

from datetime import UTC, date, datetime, timedelta

from backend.app.config import Settings, get_settings
from backend.app.models.trip import PlannedTour, TripPlan
from backend.app.scheduling.clock import wraps_midnight

MAX_LINE_OCTETS = 75


def escape_text(text: str) -> str:
    """Escape an iCalendar TEXT value."""
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )


def fold_line(line: str) -> str:
    """Fold a content line to at most 75 octets per physical line (RFC 5545 3.1).

    Continuation lines start with a single space, which counts toward the
    limit. Multi-byte UTF-8 characters are never split.
    """
    if len(line.encode()) <= MAX_LINE_OCTETS:
        return line

    segments: list[str] = []
    current = ""
    limit = MAX_LINE_OCTETS
    for char in line:
        if len((current + char).encode()) > limit:
            segments.append(current)
            current = char
            limit = MAX_LINE_OCTETS - 1
        else:
            current += char
    segments.append(current)
    return "\r\n ".join(segments)


def _local_stamp(day: date, clock: str) -> str:
    return f"{day.strftime('%Y%m%d')}T{clock.replace(':', '')}00"


def _format_hours(hours: float) -> str:
    return f"{hours:g}"


def build_event(tour: PlannedTour, stamp: str, settings: Settings) -> list[str]:
    """VEVENT lines for one planned tour, using its scheduled times."""
    end_day = tour.date
    if wraps_midnight(tour.departure_time, tour.end_time):
        end_day = tour.date + timedelta(days=1)

    description = (
        f"Fjord cruise - {_format_hours(tour.duration_hours)} hours - "
        f"{tour.price} {settings.currency} per person"
    )
    return [
        "BEGIN:VEVENT",
        f"UID:{tour.tour_slug}-{tour.date.isoformat()}@{settings.calendar_uid_domain}",
        f"DTSTAMP:{stamp}",
        f"DTSTART:{_local_stamp(tour.date, tour.departure_time)}",
        f"DTEND:{_local_stamp(end_day, tour.end_time)}",
        f"SUMMARY:{escape_text(tour.tour_name)}",
        f"DESCRIPTION:{escape_text(description)}",
        "END:VEVENT",
    ]


def generate_ics(
    plan: TripPlan,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> str:
    """Render a plan as an iCalendar document.

    Args:
        plan: Trip plan with scheduled departure/end times
        now: Timestamp for DTSTAMP (defaults to current UTC time)
        settings: Settings override

    Returns:
        VCALENDAR text with CRLF line endings
    """
    settings = settings or get_settings()
    now = now or datetime.now(UTC)
    stamp = now.astimezone(UTC).strftime("%Y%m%dT%H%M%SZ")

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{settings.calendar_prodid}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        f"X-WR-CALNAME:{escape_text(settings.calendar_name)}",
    ]
    for tour in plan.tours:
        lines.extend(build_event(tour, stamp, settings))
    lines.append("END:VCALENDAR")
    return "\r\n".join(fold_line(line) for line in lines) + "\r\n"
