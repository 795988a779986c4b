from __future__ import annotations

from dataclasses import dataclass

from shared.contracts.enums import ErrorCategory

SERVICE_CONFIGURATION_ERROR_MESSAGE = "Service configuration error"
INTERNAL_SERVER_ERROR_MESSAGE = "Internal Server Error"


@dataclass
class AppError(Exception):
    category: ErrorCategory
    message: str
    http_status: int = 400

    def __str__(self) -> str:
        return self.message


class InputValidationError(AppError):
    def __init__(self, message: str, field_errors: dict[str, list[str]] | None = None) -> None:
        super().__init__(ErrorCategory.VALIDATION_ERROR, message, http_status=400)
        self.field_errors = dict(field_errors or {})


class AuthError(AppError):
    def __init__(self, message: str, *, upstream_status: int | None = None) -> None:
        self.upstream_status = upstream_status
        super().__init__(ErrorCategory.AUTH_ERROR, message, http_status=500)


class GatewayTransportError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCategory.TRANSPORT_ERROR, message, http_status=500)


class UpstreamProtocolError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCategory.PROTOCOL_ERROR, message, http_status=500)
