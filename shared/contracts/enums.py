from __future__ import annotations

from enum import Enum


class PaymentCategory(str, Enum):
    ERP = "ERP"
    POS = "POS"
    ECOMMERCE = "ECOMMERCE"
    UTILITY = "UTILITY"
    PAYROLL = "PAYROLL"
    SUPPLIER = "SUPPLIER"
    LOAN = "LOAN"
    GOVERNMENT = "GOVERNMENT"
    MISCELLANEOUS = "MISCELLANEOUS"
    OTHER = "OTHER"


class PaymentStatus(str, Enum):
    PAID = "PAID"
    UNPAID = "UNPAID"
    DECLINED = "DECLINED"


class DecliningReason(str, Enum):
    SERVER_FAILURE = "SERVER_FAILURE"
    PAYMENT_EXPIRATION = "PAYMENT_EXPIRATION"
    PAYMENT_CANCELLATION = "PAYMENT_CANCELLATION"


class GatewayOperation(str, Enum):
    CREATE = "create"
    CANCEL = "cancel"
    REFUND = "refund"
    CHECK_STATUS = "check_status"


class GatewayEnvironment(str, Enum):
    DEV = "dev"
    STAGE = "stage"
    PROD = "prod"


class ErrorCategory(str, Enum):
    VALIDATION_ERROR = "validation_error"
    AUTH_ERROR = "auth_error"
    UPSTREAM_ERROR = "upstream_error"
    TRANSPORT_ERROR = "transport_error"
    PROTOCOL_ERROR = "protocol_error"
