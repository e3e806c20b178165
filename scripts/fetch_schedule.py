"""Fetch DVGUPS groups or schedules as JSON or a table.

Standalone CLI script around TimetableClient. Diagnostics go to stderr so
stdout stays clean for JSON.

Run with: python scripts/fetch_schedule.py --faculties
Groups:   python scripts/fetch_schedule.py --faculty 2 --search ИСТ
Schedule: python scripts/fetch_schedule.py --group 57124 --date 01.09.2025
Weeks:    python scripts/fetch_schedule.py --group 57124 --weeks 2 --table
Rooms:    python scripts/fetch_schedule.py --by-room --output data/rooms.json
Teachers: python scripts/fetch_schedule.py --by-teacher

Exit codes:
  0 = success (JSON or table on stdout, or file written for --output)
  1 = error (message on stderr)
"""

import argparse
import asyncio
import json
import os
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.timetable.client import TimetableClient  # noqa: E402
from src.timetable.config import get_config  # noqa: E402
from src.timetable.errors import ScrapingError  # noqa: E402
from src.timetable.logging import get_logger, setup_logging  # noqa: E402
from src.timetable.models import Faculty, ScheduleDay  # noqa: E402
from src.timetable.utils import (  # noqa: E402
    filter_groups,
    parse_api_date,
    shift_week,
    week_range_label,
)

log = get_logger(__name__)


def _parse_date(text: str) -> date:
    parsed = parse_api_date(text)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"expected DD.MM.YYYY, got {text!r}")
    return parsed


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        description="Fetch DVGUPS groups or class schedules as JSON or table.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    view = parser.add_mutually_exclusive_group(required=True)
    view.add_argument(
        "--faculties",
        action="store_true",
        help="List the known faculties and their ids.",
    )
    view.add_argument(
        "--faculty",
        type=str,
        metavar="ID",
        help="List the groups of a faculty.",
    )
    view.add_argument(
        "--group",
        type=str,
        metavar="ID",
        help="Fetch a group's schedule.",
    )
    view.add_argument(
        "--by-room",
        action="store_true",
        help="Fetch the room-indexed schedule.",
    )
    view.add_argument(
        "--by-teacher",
        action="store_true",
        help="Fetch the teacher-indexed schedule.",
    )

    parser.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="Reference date as DD.MM.YYYY (default: today).",
    )
    parser.add_argument(
        "--weeks",
        type=int,
        default=1,
        help="Number of consecutive weeks to fetch for --group (default: 1).",
    )
    parser.add_argument(
        "--search",
        type=str,
        default="",
        help="Filter --faculty groups by short or full name.",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Output a human-readable table instead of JSON.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write JSON to this file instead of stdout.",
    )
    return parser.parse_args(argv)


def _format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Format rows as a pipe-separated table with padded columns."""
    if not rows:
        return "(nothing scheduled)"

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    separator = "-+-".join("-" * w for w in widths)
    row_lines = [
        " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row))
        for row in rows
    ]
    return "\n".join([header_line, separator, *row_lines])


def _day_rows(days: list[ScheduleDay]) -> list[list[str]]:
    rows = []
    for day in days:
        for lesson in day.lessons:
            rows.append(
                [
                    f"{day.date:%d.%m} {day.weekday}",
                    str(lesson.pair_number),
                    lesson.time_range,
                    lesson.type.value,
                    lesson.subject,
                    lesson.room or "-",
                    lesson.teacher.name if lesson.teacher else "-",
                ]
            )
    return rows


_DAY_HEADERS = ["Day", "Pair", "Time", "Type", "Subject", "Room", "Teacher"]


def _emit(payload, table: str | None, args: argparse.Namespace) -> None:
    if args.table and table is not None:
        print(table)
        return

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        output_file = Path(args.output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(text, encoding="utf-8")
        log.info("output_written", path=str(output_file))
    else:
        print(text)


async def main(args: argparse.Namespace) -> None:
    reference = args.date or date.today()

    if args.faculties:
        faculties = Faculty.all()
        _emit(
            [f.model_dump(mode="json") for f in faculties],
            _format_table(["Id", "Name"], [[f.id, f.name] for f in faculties]),
            args,
        )
        return

    async with TimetableClient() as client:
        if args.faculty is not None:
            groups = await client.fetch_groups(args.faculty, on=reference)
            groups = filter_groups(groups, args.search)
            _emit(
                [g.model_dump(mode="json") for g in groups],
                _format_table(
                    ["Id", "Group", "Programme"],
                    [[g.id, g.name, g.full_name] for g in groups],
                ),
                args,
            )
        elif args.group is not None:
            schedules = []
            for offset in range(max(args.weeks, 1)):
                start = shift_week(reference, offset)
                log.info("fetching_week", group_id=args.group, week=week_range_label(start))
                schedules.append(await client.fetch_schedule(args.group, start))
            days = [day for schedule in schedules for day in schedule.days]
            _emit(
                [s.model_dump(mode="json") for s in schedules],
                _format_table(_DAY_HEADERS, _day_rows(days)),
                args,
            )
        else:
            if args.by_room:
                days = await client.fetch_schedule_by_room(on=reference)
            else:
                days = await client.fetch_schedule_by_teacher(on=reference)
            _emit(
                [d.model_dump(mode="json") for d in days],
                _format_table(_DAY_HEADERS, _day_rows(days)),
                args,
            )


if __name__ == "__main__":
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)
    args = _parse_args()
    try:
        asyncio.run(main(args))
    except ScrapingError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
