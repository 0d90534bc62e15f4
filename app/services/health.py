# app/services/health.py
import logging
from typing import Optional

import httpx

from app.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


def resolve_health_check_url(settings: Settings) -> str:
    return settings.HEALTH_CHECK_URL or f"http://localhost:{settings.PORT}/"


async def perform_health_check(
    url: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    client: Optional[httpx.AsyncClient] = None,
) -> bool:
    """GET ``url`` to keep the host from idling. Returns False on any failure, never raises."""
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url, timeout=timeout)
        response.raise_for_status()
    except Exception as e:
        logger.error("Health check failed for %s: %s", url, str(e) or type(e).__name__)
        return False

    logger.info("Health check success for %s - status: %s", url, response.status_code)
    return True
