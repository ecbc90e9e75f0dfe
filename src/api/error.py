"""API error rendering

Use cases return error codes; this module owns the single mapping from code
to HTTP status and the `{"error": {...}}` response body.
"""

from typing import Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error

ERROR_STATUS_CODES = {
    "RENTAL_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ITEM_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ROOM_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ITEM_DELETED": status.HTTP_410_GONE,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "USER_BANNED": status.HTTP_403_FORBIDDEN,
    "INVALID_TRANSITION": status.HTTP_409_CONFLICT,
    "CONFLICT_RETRY": status.HTTP_409_CONFLICT,
    "EMAIL_TAKEN": status.HTTP_409_CONFLICT,
    "INSUFFICIENT_FUNDS": status.HTTP_402_PAYMENT_REQUIRED,
    "INVALID_REQUEST": status.HTTP_400_BAD_REQUEST,
    "INVALID_AMOUNT": status.HTTP_400_BAD_REQUEST,
    "STORAGE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_code_for(error: Error) -> int:
    if error.code in ERROR_STATUS_CODES:
        return ERROR_STATUS_CODES[error.code]
    if error.code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    """Raised by routes to return a structured error response"""

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_code_for(error)

    def to_body(self) -> dict:
        body = {"code": self.error.code, "message": self.error.message}
        if self.error.details:
            body["details"] = self.error.details
        return {"error": body}


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())
