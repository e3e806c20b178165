"""Decoders for the HTML fragments the timetable endpoint renders."""

from src.timetable.pages.groups import decode_groups
from src.timetable.pages.lessons import decode_lesson_row, decode_lessons
from src.timetable.pages.schedule import (
    decode_schedule,
    decode_schedule_days,
    extract_group_name,
)

__all__ = [
    "decode_groups",
    "decode_lesson_row",
    "decode_lessons",
    "decode_schedule",
    "decode_schedule_days",
    "extract_group_name",
]
