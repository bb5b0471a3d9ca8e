"""Interface layer errors and HTTP error translation."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from birddex.domain.error import (
    AuthenticationError,
    DomainError,
    DuplicateActionError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthenticatedError(InterfaceError):
    """The request carries no valid session."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


# Server messages that are reworded before they reach the user
FRIENDLY_MESSAGES = {
    "A hidden photo cannot be the top photo for a species": (
        "Set a different top photo before removing the photo"
    ),
}


def translate_error_message(message: str) -> str:
    """Reword a known server message; anything else passes through."""
    for raw, friendly in FRIENDLY_MESSAGES.items():
        if raw in message:
            return friendly
    return message


STATUS_CODES: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DuplicateActionError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (PersistenceError, status.HTTP_502_BAD_GATEWAY),
]


def status_code_for(error: Exception) -> int:
    for error_type, code in STATUS_CODES:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_error(request: Request, error: Exception) -> JSONResponse:
    """Render a domain or interface error as ``{"detail": message}``."""
    code = status_code_for(error)
    detail = translate_error_message(str(error))
    if code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error_type=type(error).__name__,
            error=detail,
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            status_code=code,
            error_type=type(error).__name__,
        )
    return JSONResponse(status_code=code, content={"detail": detail})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_error)
    app.add_exception_handler(InterfaceError, handle_error)
