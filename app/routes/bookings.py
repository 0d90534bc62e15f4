from datetime import timedelta
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.database import booking_collection
from app.middleware.rbac import get_current_admin
from app.schemas.bookings import ReconciliationReport
from app.services.reconciliation import complete_expired_bookings

admin_booking_router = APIRouter(tags=["Bookings"])


def get_booking_collection():
    return booking_collection


# Admin: run the automatic completion pass now instead of waiting for the next tick
@admin_booking_router.post("/trigger-completion-check", response_model=ReconciliationReport)
async def trigger_completion_check(
    admin=Depends(get_current_admin),
    collection=Depends(get_booking_collection),
):
    return await complete_expired_bookings(
        collection,
        timezone=ZoneInfo(settings.SCHEDULER_TIMEZONE),
        slot_duration=timedelta(minutes=settings.SLOT_DURATION_MINUTES),
    )
