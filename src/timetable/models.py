"""Pydantic models for timetable data.

All records are frozen Pydantic v2 models: the decoders build them once and
hand them to the caller, nothing mutates them afterwards.
"""

from datetime import date, datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_SCHEDULE_SPAN = timedelta(days=7)


class Faculty(BaseModel):
    """An institute or faculty of the university.

    Faculties are reference data: the portal never lists them, the ids are
    the fixed FacID values its group selector expects.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str

    @classmethod
    def all(cls) -> tuple["Faculty", ...]:
        return FACULTIES

    @classmethod
    def get(cls, faculty_id: str) -> "Faculty | None":
        for faculty in FACULTIES:
            if faculty.id == faculty_id:
                return faculty
        return None


FACULTIES: tuple[Faculty, ...] = tuple(
    Faculty(id=faculty_id, name=name)
    for faculty_id, name in (
        ("8", "Естественно-научный институт"),
        ("5", "Институт воздушных сообщений и мультитранспортных технологий"),
        ("11", "Институт интегрированных форм обучения"),
        ("9", "Институт международного сотрудничества"),
        ("4", "Институт транспортного строительства"),
        ("1", "Институт тяги и подвижного состава"),
        ("2", "Институт управления, автоматизации и телекоммуникаций"),
        ("3", "Институт экономики"),
        ("10", "Медицинское училище"),
        ("34", "Российско-китайский транспортный институт"),
        ("7", "Социально-гуманитарный институт"),
        ("19", "Хабаровский техникум железнодорожного транспорта"),
        ("6", "Электроэнергетический институт"),
        ("-1", "АмИЖТ"),
        ("-2", "БамИЖТ"),
        ("-3", "ПримИЖТ"),
        ("-4", "СахИЖТ"),
    )
)


class Group(BaseModel):
    """A student group from the faculty group selector."""

    model_config = ConfigDict(frozen=True)

    id: str  # GroupID option value, e.g. "57124"
    name: str  # Short code, e.g. "БО241ИСТ"
    full_name: str  # Programme title, e.g. "Информационные системы"
    faculty_id: str = ""  # Supplied by the caller, not present in the markup


class LessonType(str, Enum):
    """Class category, valued by the portal's own labels."""

    LECTURE = "Лекции"
    PRACTICE = "Практика"
    LABORATORY = "Лабораторные работы"
    UNKNOWN = "Неизвестно"

    @classmethod
    def from_label(cls, label: str) -> "LessonType":
        """Map a free-text label to a type, case-insensitively.

        Anything that is not an exact match falls back to UNKNOWN.
        """
        wanted = label.strip().lower()
        for member in (cls.LECTURE, cls.PRACTICE, cls.LABORATORY):
            if member.value.lower() == wanted:
                return member
        return cls.UNKNOWN


class Teacher(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str | None = None  # Only when the row carries a mailto link


class Lesson(BaseModel):
    """One class session ("pair") in a day's table."""

    model_config = ConfigDict(frozen=True)

    pair_number: int  # 1-6 nominally
    time_start: str  # "09:50", kept verbatim
    time_end: str  # "11:20", kept verbatim
    type: LessonType = LessonType.UNKNOWN
    subject: str = ""
    room: str | None = None
    teacher: Teacher | None = None
    groups: list[str] = Field(default_factory=list)
    online_info: str | None = None  # Conferencing details (ZOOM, Discord, ...)
    is_even_week: bool | None = None

    @property
    def time_range(self) -> str:
        return f"{self.time_start}-{self.time_end}"


class ScheduleDay(BaseModel):
    """All lessons of one calendar day."""

    model_config = ConfigDict(frozen=True)

    date: date
    weekday: str  # Localized label as printed, e.g. "Понедельник"
    week_number: int | None = None
    is_even_week: bool | None = None
    lessons: list[Lesson] = Field(default_factory=list)

    @property
    def lesson_count(self) -> int:
        return len(self.lessons)


class Schedule(BaseModel):
    """A group's schedule over a date window.

    ``end_date`` defaults to one week after ``start_date`` and may never
    precede it.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str
    group_name: str
    faculty_id: str = ""
    start_date: date
    end_date: date = Field(default=None, validate_default=True)
    days: list[ScheduleDay] = Field(default_factory=list)
    retrieved_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("end_date", mode="before")
    @classmethod
    def _default_end_date(cls, value, info):
        if value is None and "start_date" in info.data:
            return info.data["start_date"] + DEFAULT_SCHEDULE_SPAN
        return value

    @model_validator(mode="after")
    def _check_window(self) -> "Schedule":
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date} precedes start_date {self.start_date}"
            )
        return self

    @property
    def lesson_count(self) -> int:
        return sum(day.lesson_count for day in self.days)


class LessonTime(BaseModel):
    """Bell schedule slot for a pair number."""

    model_config = ConfigDict(frozen=True)

    number: int
    start_time: str
    end_time: str

    @property
    def time_range(self) -> str:
        return f"{self.start_time} - {self.end_time}"

    @classmethod
    def for_pair(cls, number: int) -> "LessonTime | None":
        for slot in BELL_SCHEDULE:
            if slot.number == number:
                return slot
        return None


BELL_SCHEDULE: tuple[LessonTime, ...] = (
    LessonTime(number=1, start_time="8:05", end_time="9:35"),
    LessonTime(number=2, start_time="9:50", end_time="11:20"),
    LessonTime(number=3, start_time="11:35", end_time="13:05"),
    LessonTime(number=4, start_time="13:35", end_time="15:05"),
    LessonTime(number=5, start_time="15:15", end_time="16:45"),
    LessonTime(number=6, start_time="16:55", end_time="18:25"),
)
