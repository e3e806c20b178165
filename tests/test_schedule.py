from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from src.timetable.models import LessonType
from src.timetable.pages.schedule import (
    decode_schedule,
    decode_schedule_days,
    extract_group_name,
)

from tests.conftest import FULL_ROW, day, row


def test_single_day_header_and_table():
    body = day("01.09.2025 Понедельник (2-я неделя)", "<tr>" + FULL_ROW + "</tr>")

    (decoded,) = decode_schedule_days(body)

    assert decoded.date == date(2025, 9, 1)
    assert decoded.weekday == "Понедельник"
    assert decoded.week_number == 2
    assert decoded.is_even_week is True
    assert len(decoded.lessons) == 1
    assert decoded.lessons[0].type is LessonType.LECTURE


def test_days_sorted_by_date(week_page):
    days = decode_schedule_days(week_page)

    assert [d.date for d in days] == [date(2025, 9, 1), date(2025, 9, 3), date(2025, 9, 8)]


def test_lessons_sorted_within_each_day(week_page):
    days = decode_schedule_days(week_page)

    assert [lesson.pair_number for lesson in days[0].lessons] == [2, 4]
    assert [lesson.pair_number for lesson in days[1].lessons] == [1, 3]


@pytest.mark.parametrize("week_number", [1, 2, 3, 4, 17, 18])
def test_even_week_flag(week_number):
    body = day(f"01.09.2025 Понедельник ({week_number}-я неделя)", row(1))

    (decoded,) = decode_schedule_days(body)

    assert decoded.week_number == week_number
    assert decoded.is_even_week == (week_number % 2 == 0)


def test_no_headers_and_no_tables():
    assert decode_schedule_days("") == []
    assert decode_schedule_days("<p>Занятий нет</p>") == []


def test_header_without_table_voids_page():
    body = (
        day("01.09.2025 Понедельник (2-я неделя)", row(1))
        + "<h3>02.09.2025 Вторник (2-я неделя)</h3><p>Занятий нет</p>"
    )

    assert decode_schedule_days(body) == []


def test_table_without_day_header_voids_page():
    body = day("01.09.2025 Понедельник (2-я неделя)", row(1)) + day("Итоги недели", row(2))

    assert decode_schedule_days(body) == []


def test_unparseable_date_skips_only_that_day():
    body = day("32.13.2025 Понедельник (2-я неделя)", row(1)) + day(
        "02.09.2025 Вторник (2-я неделя)", row(2)
    )

    days = decode_schedule_days(body)

    assert [d.date for d in days] == [date(2025, 9, 2)]


def test_empty_table_gives_day_without_lessons():
    body = day("06.09.2025 Суббота (2-я неделя)", "")

    (decoded,) = decode_schedule_days(body)

    assert decoded.lessons == []


def test_extract_group_name():
    assert extract_group_name("<h2>Расписание гр. БО241ИСТ</h2>") == "БО241ИСТ"
    assert extract_group_name("Группа БО211АДС") == "БО211АДС"
    assert extract_group_name("<h2>Расписание</h2>") is None


def test_decode_schedule(week_page):
    schedule = decode_schedule(
        "<h2>Расписание гр. БО241ИСТ</h2>" + week_page,
        "57124",
        date(2025, 9, 1),
        date(2025, 9, 14),
        faculty_id="2",
    )

    assert schedule.group_id == "57124"
    assert schedule.group_name == "БО241ИСТ"
    assert schedule.faculty_id == "2"
    assert schedule.start_date == date(2025, 9, 1)
    assert schedule.end_date == date(2025, 9, 14)
    assert [d.date for d in schedule.days] == sorted(d.date for d in schedule.days)
    assert schedule.lesson_count == 5
    assert schedule.retrieved_at.tzinfo is not None


def test_decode_schedule_defaults(week_page):
    schedule = decode_schedule(week_page, "57124", date(2025, 9, 1))

    assert schedule.group_name == "Группа 57124"
    assert schedule.end_date == date(2025, 9, 1) + timedelta(days=7)


def test_decode_schedule_of_empty_page():
    schedule = decode_schedule("", "57124", date(2025, 9, 1))

    assert schedule.days == []
    assert schedule.lesson_count == 0


def test_decode_schedule_rejects_inverted_window():
    with pytest.raises(ValidationError):
        decode_schedule("", "57124", date(2025, 9, 8), date(2025, 9, 1))
