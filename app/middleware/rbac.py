# app/middleware/rbac.py
"""
Request authentication for the three access policies: user only, admin only,
and either of the two.

The token comes from the ``accessToken`` cookie or an ``Authorization:
Bearer`` header and must carry the principal id in its ``_id`` claim.
"""
import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.error_messages import AppError, ErrorKind, ErrorResponses
from app.models.user import find_admin_by_id, find_user_by_id
from app.schemas.principal import ResolvedPrincipal
from app.utils.auth_utils import decode_token

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "accessToken"

bearer_scheme = HTTPBearer(auto_error=False)


def extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return None


def _verified_subject(token: Optional[str]) -> str:
    if not token:
        raise ErrorResponses.MISSING_TOKEN
    payload = decode_token(token)
    subject = payload.get("_id")
    if not subject:
        raise ErrorResponses.INVALID_TOKEN
    return subject


def _attach(request: Request, principal: ResolvedPrincipal) -> ResolvedPrincipal:
    setattr(request.state, principal.role, principal.identity)
    request.state.user_type = principal.role
    return principal


async def get_current_user(request: Request, token: Optional[str] = Depends(extract_token)):
    try:
        subject = _verified_subject(token)
        user = await find_user_by_id(subject)
    except AppError:
        raise
    except Exception:
        logger.exception("User authentication failed unexpectedly")
        raise ErrorResponses.INTERNAL_SERVER_ERROR

    if user is None:
        raise ErrorResponses.USER_NOT_FOUND
    return _attach(request, ResolvedPrincipal(role="user", identity=user))


async def get_current_admin(request: Request, token: Optional[str] = Depends(extract_token)):
    try:
        subject = _verified_subject(token)
        admin = await find_admin_by_id(subject)
    except AppError:
        raise
    except Exception:
        logger.exception("Admin authentication failed unexpectedly")
        raise ErrorResponses.INTERNAL_SERVER_ERROR

    if admin is None:
        raise ErrorResponses.ADMIN_NOT_FOUND
    return _attach(request, ResolvedPrincipal(role="admin", identity=admin))


async def get_user_or_admin(request: Request, token: Optional[str] = Depends(extract_token)):
    try:
        subject = _verified_subject(token)

        user = await find_user_by_id(subject)
        if user is not None:
            return _attach(request, ResolvedPrincipal(role="user", identity=user))

        admin = await find_admin_by_id(subject)
        if admin is not None:
            return _attach(request, ResolvedPrincipal(role="admin", identity=admin))

        raise ErrorResponses.PRINCIPAL_NOT_FOUND
    except AppError as e:
        if e.kind is ErrorKind.UNAUTHORIZED:
            raise
        raise AppError(ErrorKind.UNAUTHORIZED, e.message)
    except Exception as e:
        logger.debug("User/admin authentication failed: %s", e)
        raise AppError(ErrorKind.UNAUTHORIZED, str(e) or "Invalid access token")
