# app/services/expiry.py
"""Decide whether a booked slot has already been played."""
from datetime import date, datetime, time, timedelta
from typing import Mapping, Union

from app.utils.time_slots import parse_time_slot

DEFAULT_SLOT_DURATION = timedelta(hours=1)

BookingDate = Union[date, datetime]


def _calendar_date(booking_date: BookingDate, now: datetime) -> date:
    if not isinstance(booking_date, datetime):
        return booking_date
    if booking_date.tzinfo is None:
        return booking_date.date()
    if now.tzinfo is None:
        return booking_date.astimezone().date()
    return booking_date.astimezone(now.tzinfo).date()


def is_booking_expired(
    booking_date: BookingDate,
    time_slot: str,
    now: datetime,
    slot_duration: timedelta = DEFAULT_SLOT_DURATION,
) -> bool:
    """
    A booking is expired when its day is over, or when it is today and
    ``now`` is past the slot start plus ``slot_duration``.

    Only the start time of the slot text is used. A slot that cannot be
    parsed is never considered expired on its own day.
    """
    booking_day = _calendar_date(booking_date, now)
    today = now.date()

    if booking_day < today:
        return True
    if booking_day > today:
        return False

    start = parse_time_slot(time_slot)
    if start is None:
        return False

    # timedelta arithmetic lets out-of-range hours/minutes roll over instead of raising
    midnight = datetime.combine(booking_day, time(0, 0), tzinfo=now.tzinfo)
    slot_end = midnight + timedelta(hours=start.hour, minutes=start.minute) + slot_duration
    return now >= slot_end


def booking_is_expired(
    booking: Mapping,
    now: datetime,
    slot_duration: timedelta = DEFAULT_SLOT_DURATION,
) -> bool:
    booking_date = booking.get("bookingDate")
    if booking_date is None:
        return False
    return is_booking_expired(booking_date, booking.get("timeSlot"), now, slot_duration)
