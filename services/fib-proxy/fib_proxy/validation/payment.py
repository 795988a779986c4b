from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from fib_proxy.core.errors import InputValidationError
from shared.contracts import CreatePaymentRequest, PaymentStatusCallback
from shared.utils import is_uuid_text

INVALID_JSON_MESSAGE = "Invalid JSON format in request body"
INVALID_BODY_MESSAGE = "Invalid request body"
INVALID_PAYMENT_ID_MESSAGE = "Invalid payment ID format"
PAYMENT_ID_FIELD_MESSAGE = "Invalid paymentId format (must be a UUID)"
_FORM_ERRORS_KEY = "_form"


def _error_message(error: dict[str, Any]) -> str:
    if error.get("type") == "value_error":
        cause = (error.get("ctx") or {}).get("error")
        if cause is not None:
            return str(cause)
    return str(error.get("msg", "Invalid value"))


def field_errors_from(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field, keeping every message."""
    grouped: dict[str, list[str]] = {}
    for error in exc.errors():
        location = error.get("loc") or ()
        key = str(location[0]) if location else _FORM_ERRORS_KEY
        message = _error_message(error)
        messages = grouped.setdefault(key, [])
        if message not in messages:
            messages.append(message)
    return grouped


def parse_json_body(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise InputValidationError(INVALID_JSON_MESSAGE) from exc


def validate_payment_id(raw: Any) -> str:
    if not is_uuid_text(raw):
        raise InputValidationError(
            INVALID_PAYMENT_ID_MESSAGE, {"paymentId": [PAYMENT_ID_FIELD_MESSAGE]}
        )
    return raw


def validate_create_request(raw: Any) -> CreatePaymentRequest:
    try:
        return CreatePaymentRequest.model_validate(raw)
    except ValidationError as exc:
        raise InputValidationError(INVALID_BODY_MESSAGE, field_errors_from(exc)) from exc


def validate_status_callback(raw: Any) -> PaymentStatusCallback:
    try:
        callback = PaymentStatusCallback.model_validate(raw)
    except ValidationError as exc:
        raise InputValidationError(INVALID_BODY_MESSAGE, field_errors_from(exc)) from exc
    validate_payment_id(callback.id)
    return callback
