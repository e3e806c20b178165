"""Deterministic ordering for decoded records."""

from collections.abc import Iterable

from src.timetable.models import Group, Lesson, ScheduleDay


def sort_groups(groups: Iterable[Group]) -> list[Group]:
    """Order groups by short name (plain string order), then by id."""
    return sorted(groups, key=lambda g: (g.name, g.id))


def sort_lessons(lessons: Iterable[Lesson]) -> list[Lesson]:
    """Order lessons by pair number; ties keep their table order."""
    return sorted(lessons, key=lambda lesson: lesson.pair_number)


def sort_days(days: Iterable[ScheduleDay]) -> list[ScheduleDay]:
    """Order days by calendar date; ties keep their page order."""
    return sorted(days, key=lambda day: day.date)
