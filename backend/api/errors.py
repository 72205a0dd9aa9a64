"""Mapping of user domain errors to HTTP responses."""

import logging
from typing import Dict, Tuple, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.user.core.exceptions.user_errors import (
    EmailInUseError,
    EmptyPasswordError,
    InvalidEmailError,
    InvalidPasswordError,
    NotAuthenticatedError,
    UserDomainError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

# error class -> (status code, error code)
ERROR_RESPONSES: Dict[Type[UserDomainError], Tuple[int, str]] = {
    UserNotFoundError: (status.HTTP_404_NOT_FOUND, "user_not_found"),
    EmailInUseError: (status.HTTP_400_BAD_REQUEST, "email_in_use"),
    InvalidPasswordError: (status.HTTP_400_BAD_REQUEST, "invalid_password"),
    EmptyPasswordError: (status.HTTP_400_BAD_REQUEST, "empty_password"),
    InvalidEmailError: (status.HTTP_400_BAD_REQUEST, "invalid_email"),
    NotAuthenticatedError: (status.HTTP_403_FORBIDDEN, "forbidden"),
}


def error_response_for(exc: UserDomainError) -> Tuple[int, str]:
    """Status and error code for a domain error (most specific class wins)."""
    for cls in type(exc).__mro__:
        if cls in ERROR_RESPONSES:
            return ERROR_RESPONSES[cls]
    return status.HTTP_400_BAD_REQUEST, "user_error"


async def user_domain_error_handler(request: Request, exc: UserDomainError) -> JSONResponse:
    """Render a UserDomainError as {"error": ..., "message": ...}."""
    status_code, code = error_response_for(exc)

    logger.info(
        "http.user_error",
        extra={"path": request.url.path, "error": code, "status_code": status_code},
    )
    return JSONResponse(status_code=status_code, content={"error": code, "message": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserDomainError, user_domain_error_handler)
