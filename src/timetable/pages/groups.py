"""Group selector decoding.

The faculty request (FacID=..., GroupID=no) answers with the group <select>
options, one per group:

    <option value='57124'>гр. БО241ИСТ -Информационные системы</option>

The option value is the GroupID used by the schedule request. The short
code and the programme title are separated by the first hyphen.
"""

from src.timetable.logging import get_logger
from src.timetable.models import Group
from src.timetable.patterns import Pattern
from src.timetable.sorting import sort_groups

log = get_logger(__name__)

GROUP_OPTION = Pattern(r"<option value='(\d+)'>гр\.\s*([^-]+)\s*-\s*([^<]+)</option>")
ANY_OPTION = Pattern(r"<option[^>]*>(.*?)</option>")

_PREVIEW_CHARS = 500


def decode_groups(body: str, faculty_id: str) -> list[Group]:
    """Extract the groups listed in a faculty response.

    Args:
        body: Response body text.
        faculty_id: FacID the request was made for; the markup does not
            repeat it per option.

    Returns:
        Groups sorted by short name. Empty when the faculty has nothing
        listed for the requested date.
    """
    groups = [
        Group(
            id=match.stripped(1),
            name=match.stripped(2),
            full_name=match.stripped(3),
            faculty_id=faculty_id,
        )
        for match in GROUP_OPTION.finditer(body)
    ]

    if not groups:
        log.info(
            "groups_empty",
            faculty_id=faculty_id,
            option_tags=ANY_OPTION.count(body),
        )
        log.debug("groups_empty_preview", preview=body[:_PREVIEW_CHARS])
        return []

    log.info("groups_decoded", faculty_id=faculty_id, count=len(groups))
    return sort_groups(groups)
