"""Interface layer errors and the mapping of domain errors onto the wire."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from oxytalk.domain.error import (
    AlreadyContactsError,
    DomainError,
    EmptyMessageError,
    ForbiddenError,
    InviteNotFoundError,
    InvitePendingError,
    NotFoundError,
    PersistenceUnavailableError,
    SelfInviteError,
    UnauthenticatedError,
)

logger = logging.getLogger(__name__)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ProtocolError(InterfaceError):
    """Malformed realtime frame."""

    pass


# Most specific first: InviteNotFoundError is a NotFoundError
ERROR_MAP: list[tuple[type[DomainError], int, str]] = [
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED, "unauthenticated"),
    (ForbiddenError, status.HTTP_403_FORBIDDEN, "forbidden"),
    (InviteNotFoundError, status.HTTP_404_NOT_FOUND, "invite_not_found"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (InvitePendingError, status.HTTP_409_CONFLICT, "invite_pending"),
    (AlreadyContactsError, status.HTTP_409_CONFLICT, "already_contacts"),
    (SelfInviteError, status.HTTP_400_BAD_REQUEST, "self_invite"),
    (EmptyMessageError, status.HTTP_400_BAD_REQUEST, "empty_message"),
    (
        PersistenceUnavailableError,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "persistence_unavailable",
    ),
]


def describe_error(exc: DomainError) -> tuple[int, str, str]:
    """Map a domain error to (HTTP status, error code, detail)."""
    for error_type, status_code, code in ERROR_MAP:
        if isinstance(exc, error_type):
            break
    else:
        status_code, code = status.HTTP_400_BAD_REQUEST, "bad_request"

    if isinstance(exc, PersistenceUnavailableError):
        # The cause may carry connection details
        detail = "Storage temporarily unavailable"
    else:
        detail = str(exc)
    return status_code, code, detail


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code, code, detail = describe_error(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status_code, content={"detail": detail, "code": code}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers that turn domain errors into JSON error responses."""
    app.add_exception_handler(DomainError, domain_error_handler)
