"""Lesson table decoding.

Each day table holds one <tr> per pair. A row looks roughly like:

    <tr>
      <td><b>2-я пара</b><br>09:50-11:20</td>
      <td><div>(Лекции) Мат. анализ</div>
          <div>ZOOM Идентификатор 123 456 7890 код доступа 1111</div></td>
      <td wrap>312</td>
      <td><div>Иванов И.И. <a href='mailto:ivanov@dvgups.ru'>&#9993;</a></div></td>
    </tr>

Pair number and time range are required; every other field is optional and
decoded independently, so markup drift in one field leaves the rest intact.
"""

from src.timetable.logging import get_logger
from src.timetable.models import Lesson, LessonType, Teacher
from src.timetable.patterns import Match, Pattern, collapse_whitespace
from src.timetable.sorting import sort_lessons

log = get_logger(__name__)

ROW = Pattern(r"<tr[^>]*>(.*?)</tr>", multiline=True)
PAIR_NUMBER = Pattern(r"<b[^>]*>\s*(\d+)-я пара\s*</b>")
TIME_RANGE = Pattern(r"(\d{2}:\d{2})-(\d{2}:\d{2})")
TYPE_AND_SUBJECT = Pattern(r"<div>\(([^)]+)\)\s*([^<]+)</div>")
ONLINE_INFO = Pattern(
    r"<div>([^<]*(?:ZOOM|Discord|FreeConferenceCall|код доступа|Идентификатор)[^<]*)</div>",
    ignore_case=True,
)
ROOM = Pattern(r"<td[^>]*wrap[^>]*>([^<]*)</td>")
TEACHER = Pattern(
    r"<div>([^<]+?)(?:\s*<a[^>]*href='mailto:([^']+)'[^>]*>&#9993;</a>)?</div>"
)
# Group codes such as БО241ИСТ end up in the same <div> shape as teachers
GROUP_CODE = Pattern(r"[А-ЯЁ]{2}\d{3}[А-ЯЁ]+")


def decode_lessons(table_html: str) -> list[Lesson]:
    """Decode every row of a day table's inner HTML.

    Rows without a pair number or a time range are dropped.

    Returns:
        Lessons sorted by pair number.
    """
    lessons = []
    for row in ROW.finditer(table_html):
        lesson = decode_lesson_row(row.group(1) or "")
        if lesson is None:
            log.debug("lesson_row_skipped", row=row.text[:120])
            continue
        lessons.append(lesson)
    return sort_lessons(lessons)


def decode_lesson_row(row_html: str) -> Lesson | None:
    """Decode a single <tr> body into a Lesson, or None if it isn't one."""
    pair = PAIR_NUMBER.first(row_html)
    if pair is None:
        return None

    time_range = TIME_RANGE.first(row_html)
    if time_range is None:
        return None

    subject_match = TYPE_AND_SUBJECT.first(row_html)
    online_match = ONLINE_INFO.first(row_html)
    lesson_type, subject = _type_and_subject(subject_match)

    # Offsets of <div>s already decoded as another field
    claimed = {m.start for m in (subject_match, online_match) if m is not None}

    return Lesson(
        pair_number=int(pair.stripped(1)),
        time_start=time_range.stripped(1),
        time_end=time_range.stripped(2),
        type=lesson_type,
        subject=subject,
        room=_room(ROOM.first(row_html)),
        teacher=_teacher(TEACHER.last(row_html), claimed),
        groups=[],
        online_info=_online_info(online_match),
    )


def _type_and_subject(match: Match | None) -> tuple[LessonType, str]:
    if match is None:
        return LessonType.UNKNOWN, ""
    return LessonType.from_label(match.stripped(1)), match.stripped(2)


def _online_info(match: Match | None) -> str | None:
    if match is None:
        return None
    return collapse_whitespace(match.group(1) or "") or None


def _room(match: Match | None) -> str | None:
    if match is None:
        return None
    return match.stripped(1) or None


def _teacher(match: Match | None, claimed: set[int]) -> Teacher | None:
    """Build the teacher from the row's last <div>, if it plausibly is one.

    The last plain <div> is usually the teacher. Without a teacher it is
    the subject, the conferencing note, a room marker or a group list
    instead, so those are rejected.
    """
    if match is None or match.start in claimed:
        return None

    name = match.stripped(1)
    if not name or "wrap" in name or GROUP_CODE.first(name) is not None:
        return None

    return Teacher(name=name, email=match.stripped(2) or None)
