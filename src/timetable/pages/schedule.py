"""Schedule page decoding.

The schedule request (GroupID=..., AudID=no or PrepID=no) answers with one
header and one table per day:

    <h3>01.09.2025 Понедельник (2-я неделя)</h3><table class='...'>
      <tr>...</tr>
    </table>

Headers and tables are matched by two independent passes and paired by
position. When the two counts disagree the page can't be aligned safely and
no days are returned.
"""

from datetime import date

from src.timetable.logging import get_logger
from src.timetable.models import Schedule, ScheduleDay
from src.timetable.pages.lessons import decode_lessons
from src.timetable.patterns import Match, Pattern
from src.timetable.sorting import sort_days
from src.timetable.utils import parse_api_date

log = get_logger(__name__)

DAY_HEADER = Pattern(
    r"<h3>(\d{2}\.\d{2}\.\d{4})\s+([А-ЯЁ][а-яё]+)\s+\((\d+)-я неделя\)</h3>"
)
DAY_TABLE = Pattern(r"<h3>.*?</h3><table.*?>(.*?)</table>", multiline=True)
GROUP_NAME = Pattern(r"(?:гр\.\s*|группа\s*)([А-Я0-9]+[А-Я]{3})", ignore_case=True)


def decode_schedule_days(body: str) -> list[ScheduleDay]:
    """Decode every day of a schedule response.

    Used directly for the room and teacher views, which have no single
    group context.

    Returns:
        Days sorted by date. Empty when the page has no days or when its
        headers and tables can't be paired one to one.
    """
    headers = DAY_HEADER.findall(body)
    tables = DAY_TABLE.findall(body)

    if len(headers) != len(tables):
        log.warning("day_count_mismatch", headers=len(headers), tables=len(tables))
        return []

    days = []
    for header, table in zip(headers, tables):
        day = _decode_day(header, table.group(1) or "")
        if day is None:
            log.info("day_header_skipped", header=header.text)
            continue
        days.append(day)

    return sort_days(days)


def _decode_day(header: Match, table_html: str) -> ScheduleDay | None:
    day_date = parse_api_date(header.stripped(1))
    try:
        week_number = int(header.stripped(3))
    except ValueError:
        return None
    if day_date is None:
        return None

    return ScheduleDay(
        date=day_date,
        weekday=header.stripped(2),
        week_number=week_number,
        is_even_week=week_number % 2 == 0,
        lessons=decode_lessons(table_html),
    )


def extract_group_name(body: str) -> str | None:
    """Find a group code such as "гр. БО241ИСТ" anywhere on the page."""
    match = GROUP_NAME.first(body)
    if match is None:
        return None
    return match.stripped(1) or None


def decode_schedule(
    body: str,
    group_id: str,
    start_date: date,
    end_date: date | None = None,
    faculty_id: str = "",
) -> Schedule:
    """Decode a group's schedule response.

    Args:
        body: Response body text.
        group_id: GroupID the request was made for.
        start_date: First day of the requested window.
        end_date: Last day of the window; one week after start_date if None.
        faculty_id: Owning faculty, when the caller knows it.

    Returns:
        The group's Schedule. Its days are empty when nothing could be
        decoded, which is indistinguishable from an empty week.
    """
    days = decode_schedule_days(body)
    group_name = extract_group_name(body) or f"Группа {group_id}"

    schedule = Schedule(
        group_id=group_id,
        group_name=group_name,
        faculty_id=faculty_id,
        start_date=start_date,
        end_date=end_date,
        days=days,
    )

    log.info(
        "schedule_decoded",
        group_id=group_id,
        group_name=group_name,
        days=len(schedule.days),
        lessons=schedule.lesson_count,
    )
    return schedule
