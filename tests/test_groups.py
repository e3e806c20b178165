from src.timetable.models import Group
from src.timetable.pages.groups import decode_groups


def test_single_option():
    body = "<option value='123'>гр. БО241ИСТ -Информационные системы</option>"

    assert decode_groups(body, "2") == [
        Group(id="123", name="БО241ИСТ", full_name="Информационные системы", faculty_id="2")
    ]


def test_groups_sorted_by_short_name(group_options):
    groups = decode_groups(group_options, "1")

    assert [g.name for g in groups] == ["БО211АД", "БО231ПЭ", "БО241ИСТ"]
    assert [g.id for g in groups] == ["56999", "57001", "57124"]


def test_names_are_trimmed(group_options):
    groups = decode_groups(group_options, "1")

    for group in groups:
        assert group.name == group.name.strip()
        assert group.full_name == group.full_name.strip()
    assert groups[1].full_name == "Подвижной состав"


def test_faculty_id_comes_from_caller(group_options):
    assert {g.faculty_id for g in decode_groups(group_options, "34")} == {"34"}


def test_placeholder_option_is_ignored():
    body = "<option value='no'>Выберите группу</option>"

    assert decode_groups(body, "1") == []


def test_no_options_is_empty_not_error():
    assert decode_groups("", "1") == []
    assert decode_groups("<p>Нет данных</p>", "1") == []
