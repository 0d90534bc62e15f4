# app/core/error_messages.py
"""
Error type shared by the auth layer and the HTTP surface.

Errors carry an explicit ``ErrorKind`` instead of living in a subclass
hierarchy; the HTTP status is derived from the kind.
"""
from enum import Enum

from fastapi import Request, status
from fastapi.responses import JSONResponse


class ErrorKind(str, Enum):
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"
    EXPIRED = "expired"
    MALFORMED = "malformed"


STATUS_BY_KIND = {
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.MALFORMED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    def __init__(self, kind: ErrorKind, message: str = "something went wrong"):
        self.kind = kind
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict:
        return {
            "success": False,
            "statusCode": self.status_code,
            "kind": self.kind.value,
            "message": self.message,
        }

    def __repr__(self):
        return f"AppError(kind={self.kind.value!r}, message={self.message!r})"


class ErrorResponses:
    """Canned errors raised by the auth dependencies."""

    MISSING_TOKEN = AppError(ErrorKind.UNAUTHORIZED, "User not authorized: Missing access token")
    TOKEN_EXPIRED = AppError(ErrorKind.EXPIRED, "Access token expired")
    INVALID_TOKEN = AppError(ErrorKind.UNAUTHORIZED, "Invalid access token")
    MALFORMED_TOKEN = AppError(ErrorKind.MALFORMED, "Malformed access token")
    AUTHORIZATION_ERROR = AppError(ErrorKind.UNAUTHORIZED, "Authorization error")
    USER_NOT_FOUND = AppError(ErrorKind.UNAUTHORIZED, "Invalid access token: User not found")
    ADMIN_NOT_FOUND = AppError(ErrorKind.NOT_FOUND, "Admin not found")
    PRINCIPAL_NOT_FOUND = AppError(ErrorKind.UNAUTHORIZED, "Invalid access token: User/Admin not found")
    INTERNAL_SERVER_ERROR = AppError(ErrorKind.INTERNAL, "Internal server error")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
