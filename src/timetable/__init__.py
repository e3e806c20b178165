"""DVGUPS timetable retrieval.

Turns the HTML fragments rendered by the university's timetable endpoint
into typed records (groups, lessons, days, schedules). The decoders in
src.timetable.pages are pure functions over response text; TimetableClient
owns the HTTP side.
"""

from src.timetable.client import TimetableClient
from src.timetable.models import (
    Faculty,
    Group,
    Lesson,
    LessonTime,
    LessonType,
    Schedule,
    ScheduleDay,
    Teacher,
)
from src.timetable.pages import decode_groups, decode_schedule, decode_schedule_days

__all__ = [
    "TimetableClient",
    "Faculty",
    "Group",
    "Lesson",
    "LessonTime",
    "LessonType",
    "Schedule",
    "ScheduleDay",
    "Teacher",
    "decode_groups",
    "decode_schedule",
    "decode_schedule_days",
]
