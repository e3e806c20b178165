"""Date and lookup helpers shared by the client and scripts."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from src.timetable.models import Group

API_DATE_FORMAT = "%d.%m.%Y"


def format_api_date(day: date) -> str:
    """Render a date the way the portal's Time form field expects ("01.09.2025")."""
    return day.strftime(API_DATE_FORMAT)


def parse_api_date(text: str) -> date | None:
    """Parse "DD.MM.YYYY", returning None for anything else."""
    try:
        return datetime.strptime(text.strip(), API_DATE_FORMAT).date()
    except ValueError:
        return None


def week_bounds(day: date) -> tuple[date, date]:
    """Monday and Sunday of the week containing ``day``."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def week_range_label(day: date) -> str:
    """Short label for the week containing ``day``, e.g. "01.09 - 07.09"."""
    monday, sunday = week_bounds(day)
    return f"{monday:%d.%m} - {sunday:%d.%m}"


def shift_week(day: date, weeks: int = 1) -> date:
    """Move ``day`` forward (or back, for negative ``weeks``) by whole weeks."""
    return day + timedelta(weeks=weeks)


def filter_groups(groups: Iterable[Group], query: str) -> list[Group]:
    """Case-insensitive search over group short and full names.

    An empty query keeps every group.
    """
    needle = query.strip().casefold()
    if not needle:
        return list(groups)
    return [
        g
        for g in groups
        if needle in g.name.casefold() or needle in g.full_name.casefold()
    ]
