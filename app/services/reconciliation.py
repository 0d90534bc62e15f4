# app/services/reconciliation.py
"""
Automatic completion of bookings whose slot has elapsed.

Each pass scans the confirmed bookings, applies the expiry check and moves
the expired ones to ``completed``. One failing update never aborts the rest
of the batch, and no error escapes the pass: the next scheduled tick is the
retry.
"""
import logging
from datetime import datetime, timedelta, tzinfo
from typing import Optional

from app.models.bookings import find_confirmed_bookings, mark_booking_completed
from app.schemas.bookings import ReconciliationReport
from app.services.expiry import DEFAULT_SLOT_DURATION, booking_is_expired

logger = logging.getLogger(__name__)


async def complete_expired_bookings(
    collection,
    now: Optional[datetime] = None,
    timezone: Optional[tzinfo] = None,
    slot_duration: timedelta = DEFAULT_SLOT_DURATION,
) -> ReconciliationReport:
    if now is None:
        now = datetime.now(timezone)
    elif timezone is not None:
        now = now.astimezone(timezone)

    report = ReconciliationReport()
    logger.info("Running automatic booking completion check...")

    try:
        async for booking in find_confirmed_bookings(collection):
            report.scanned += 1
            booking_id = booking.get("_id")
            try:
                if not booking_is_expired(booking, now, slot_duration):
                    continue
                modified = await mark_booking_completed(booking_id, collection)
            except Exception as e:
                report.failed += 1
                logger.error("Failed to process booking %s: %s", booking_id, e)
                continue

            if modified:
                logger.info("Completed expired booking: %s", booking_id)
                report.completed += 1
                report.completed_ids.append(str(booking_id))
            else:
                logger.info("Booking %s left confirmed state before completion, skipped", booking_id)
    except Exception as e:
        report.error = str(e)
        logger.exception("Error in automatic booking completion")
        return report

    if report.completed:
        logger.info("Automatically completed %d expired bookings", report.completed)
    else:
        logger.info("No expired bookings found")
    return report
