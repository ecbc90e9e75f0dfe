"""Errors shared by use cases"""

from sqlalchemy.exc import InterfaceError, OperationalError
from libs.result import Error

# Persistence layer unreachable; surfaced as a transient infrastructure error
STORAGE_ERRORS = (OperationalError, InterfaceError, OSError)


def storage_unavailable(exc: Exception) -> Error:
    return Error(
        code="STORAGE_UNAVAILABLE",
        message="Storage is temporarily unavailable, please retry",
        reason=str(exc),
    )
