from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fib_proxy.core.errors import (
    INTERNAL_SERVER_ERROR_MESSAGE,
    SERVICE_CONFIGURATION_ERROR_MESSAGE,
    AppError,
    AuthError,
    InputValidationError,
)
from shared.contracts import ValidationErrorResponse
from shared.logging import get_logger
from shared.utils import describe_exception

logger = get_logger(__name__)


def _internal_error_response(exc: BaseException) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"message": INTERNAL_SERVER_ERROR_MESSAGE, "error": describe_exception(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(InputValidationError)
    async def handle_validation_error(
        request: Request, exc: InputValidationError
    ) -> JSONResponse:
        logger.warning(
            "request_validation_failed",
            extra={
                "extra_fields": {
                    "error_category": exc.category.value,
                    "path": request.url.path,
                    "reason": exc.message,
                    "field_errors": exc.field_errors,
                }
            },
        )
        body = ValidationErrorResponse(message=exc.message, errors=exc.field_errors or None)
        return JSONResponse(
            status_code=exc.http_status, content=body.model_dump(exclude_none=True)
        )

    @app.exception_handler(AuthError)
    async def handle_auth_error(_: Request, exc: AuthError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.http_status,
            content={"message": SERVICE_CONFIGURATION_ERROR_MESSAGE},
        )

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        logger.error(
            "application_error",
            extra={
                "extra_fields": {
                    "error_category": exc.category.value,
                    "path": request.url.path,
                    "reason": exc.message,
                }
            },
        )
        return _internal_error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "unexpected_error",
            extra={"extra_fields": {"error_category": "unexpected", "path": request.url.path}},
        )
        return _internal_error_response(exc)
