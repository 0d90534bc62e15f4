from app.database import booking_collection
from app.schemas.bookings import BookingStatus

CONFIRMED_FILTER = {"status": BookingStatus.CONFIRMED.value}
EXPIRY_PROJECTION = {"bookingDate": 1, "timeSlot": 1, "status": 1}


def find_confirmed_bookings(collection=booking_collection):
    """Cursor over confirmed bookings, projected to the fields expiry needs."""
    return collection.find(CONFIRMED_FILTER, EXPIRY_PROJECTION)


async def mark_booking_completed(booking_id, collection=booking_collection):
    # Raw update, no document validation: past booking dates must stay writable.
    # Only a booking that is still confirmed transitions.
    result = await collection.update_one(
        {"_id": booking_id, **CONFIRMED_FILTER},
        {"$set": {"status": BookingStatus.COMPLETED.value}},
    )
    return result.modified_count
