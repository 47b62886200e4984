"""Map domain errors to HTTP responses.

Every error body has the same shape::

    {"message": "Human-readable error message"}
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.errors import (
    DuplicateSubscriptionError,
    EntityNotFoundError,
    PathTwoError,
    ValidationError,
)
from src.infrastructure.logging.logger import get_app_logger

ERROR_STATUS: dict[type[PathTwoError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateSubscriptionError: status.HTTP_409_CONFLICT,
}


def status_for(exc: PathTwoError) -> int:
    """Return the HTTP status for a domain error, 500 when unmapped."""
    for error_type, code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the domain and request validation handlers."""
    logger = get_app_logger()

    @app.exception_handler(PathTwoError)
    async def handle_domain_error(
        request: Request,
        exc: PathTwoError,
    ) -> JSONResponse:
        code = status_for(exc)
        if code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        else:
            logger.warning(
                f"{request.method} {request.url.path} -> {code}: {exc}"
            )
        return JSONResponse(status_code=code, content={"message": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        missing = sorted(
            {
                str(error["loc"][-1])
                for error in exc.errors()
                if error.get("loc")
            }
        )
        message = "Invalid request"
        if missing:
            message = f"Invalid request: {', '.join(missing)}"
        logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": message},
        )


__all__ = ["ERROR_STATUS", "status_for", "setup_exception_handlers"]
