# app/utils/auth_utils.py
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from app.core.config import settings
from app.core.error_messages import ErrorResponses


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.ACCESS_TOKEN_SECRET, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """Verify signature and expiry; failures surface as typed AppErrors."""
    try:
        return jwt.decode(token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise ErrorResponses.TOKEN_EXPIRED
    except jwt.InvalidSignatureError:
        raise ErrorResponses.INVALID_TOKEN
    except jwt.DecodeError:
        raise ErrorResponses.MALFORMED_TOKEN
    except jwt.InvalidTokenError:
        raise ErrorResponses.AUTHORIZATION_ERROR
