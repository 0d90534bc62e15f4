# app/database.py
import logging

import certifi
from motor.motor_asyncio import AsyncIOMotorClient

from app.core.config import settings

logger = logging.getLogger(__name__)


def _client_options() -> dict:
    options = {"tz_aware": True}
    if settings.MONGO_TLS:
        options["tlsCAFile"] = certifi.where()
    return options


mongo_client = AsyncIOMotorClient(settings.MONGO_URL, **_client_options())
db = mongo_client[settings.DB_NAME]

user_collection = db["users"]
admin_collection = db["admins"]
booking_collection = db["bookings"]


async def ping_database() -> bool:
    try:
        result = await mongo_client.admin.command("ping")
        logger.info("MongoDB connected: %s", result)
        return True
    except Exception as e:
        logger.error("MongoDB connection failed: %s", e)
        return False
