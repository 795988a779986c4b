from shared.contracts.dto import (
    AMOUNT_PATTERN,
    ISO8601_DURATION_PATTERN,
    CheckPaymentStatusResponse,
    CreatePaymentRequest,
    ErrorResponse,
    MessageResponse,
    MonetaryValue,
    PayerInfo,
    PaymentResponse,
    PaymentStatusCallback,
    UpstreamErrorDetail,
    UpstreamErrorPayload,
    ValidationErrorResponse,
)
from shared.contracts.enums import (
    DecliningReason,
    ErrorCategory,
    GatewayEnvironment,
    GatewayOperation,
    PaymentCategory,
    PaymentStatus,
)

__all__ = [
    "AMOUNT_PATTERN",
    "ISO8601_DURATION_PATTERN",
    "CheckPaymentStatusResponse",
    "CreatePaymentRequest",
    "DecliningReason",
    "ErrorCategory",
    "ErrorResponse",
    "GatewayEnvironment",
    "GatewayOperation",
    "MessageResponse",
    "MonetaryValue",
    "PayerInfo",
    "PaymentCategory",
    "PaymentResponse",
    "PaymentStatus",
    "PaymentStatusCallback",
    "UpstreamErrorDetail",
    "UpstreamErrorPayload",
    "ValidationErrorResponse",
]
