"""Shared HTML fragments shaped like the timetable endpoint's responses."""

import pytest

GROUP_OPTIONS = """
<select name='GroupID'>
<option value='no'>Выберите группу</option>
<option value='57124'>гр. БО241ИСТ -Информационные системы</option>
<option value='57001'>гр.  БО231ПЭ - Подвижной состав  </option>
<option value='56999'>гр. БО211АД-Автомобильные дороги</option>
</select>
"""

FULL_ROW = """
<td><b>2-я пара</b><br>09:50-11:20</td>
<td><div>(Лекции) Мат. анализ</div>
<div>ZOOM Идентификатор 123 456 7890
код доступа 1111</div></td>
<td wrap>312</td>
<td><div>Иванов И.И. <a href='mailto:ivanov@dvgups.ru'>&#9993;</a></div></td>
"""


def row(pair: int, time: str = "09:50-11:20", label: str = "Лекции", subject: str = "Физика") -> str:
    return (
        f"<tr><td><b>{pair}-я пара</b><br>{time}</td>"
        f"<td><div>({label}) {subject}</div></td>"
        f"<td wrap>{100 + pair}</td>"
        f"<td><div>Петров П.П.</div></td></tr>"
    )


def day(header: str, rows: str) -> str:
    return f"<h3>{header}</h3><table class='table table-bordered'>\n{rows}\n</table>\n"


@pytest.fixture
def group_options() -> str:
    return GROUP_OPTIONS


@pytest.fixture
def week_page() -> str:
    """Three days listed out of date order."""
    return (
        "<h2>Расписание занятий</h2>\n"
        + day("03.09.2025 Среда (2-я неделя)", row(1) + row(3))
        + day("01.09.2025 Понедельник (2-я неделя)", row(4) + row(2))
        + day("08.09.2025 Понедельник (3-я неделя)", row(1))
    )
