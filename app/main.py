# app/main.py

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.error_messages import AppError, app_error_handler
from app.database import booking_collection, ping_database
from app.routes.auth import admin_router, session_router, user_router
from app.routes.bookings import admin_booking_router
from app.worker import build_scheduler

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Turf Booking API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(AppError, app_error_handler)

app.include_router(user_router, prefix="/api/v1/users")
app.include_router(admin_router, prefix="/api/v1/admins")
app.include_router(admin_booking_router, prefix="/api/v1/admins/bookings")
app.include_router(session_router, prefix="/api/v1/session")


# Target of the liveness ping
@app.get("/")
async def root():
    return {"message": "Welcome to Turf Booking API"}


@app.on_event("startup")
async def startup():
    await ping_database()
    if settings.SCHEDULER_ENABLED:
        app.state.scheduler = build_scheduler(settings, booking_collection)
        app.state.scheduler.start()


@app.on_event("shutdown")
async def shutdown():
    scheduler = getattr(app.state, "scheduler", None)
    if scheduler is not None:
        await scheduler.stop()
