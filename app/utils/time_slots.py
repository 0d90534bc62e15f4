# app/utils/time_slots.py
import re
from typing import NamedTuple, Optional

# First "H[:MM] AM|PM" in the text, e.g. the start of "6:00 AM - 7:00 AM".
_TIME_PATTERN = re.compile(r"(\d+)(?::(\d+))?\s*(AM|PM)", re.IGNORECASE)


class SlotTime(NamedTuple):
    hour: int
    minute: int


def parse_time_slot(time_slot) -> Optional[SlotTime]:
    """Return the 24-hour start time of a slot string, or None if it has none.

    Minutes are not range checked.
    """
    if not isinstance(time_slot, str):
        return None
    match = _TIME_PATTERN.search(time_slot)
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) else 0
    meridiem = match.group(3).upper()

    if meridiem == "PM" and hour != 12:
        hour += 12
    if meridiem == "AM" and hour == 12:
        hour = 0

    return SlotTime(hour, minute)
