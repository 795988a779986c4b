"""Turns raw gateway responses into a single success/failure contract.

Each operation has exactly one status that means success; any other status,
other 2xx codes included, is reported back as a failure carrying the
upstream status. Check-status is the exception: the gateway may answer 2xx
with an ``errors`` array in the body, which is reported as a 400 failure.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from fib_proxy.core.errors import UpstreamProtocolError
from fib_proxy.gateway.outcomes import Failure, NormalizedOutcome, RawResponse, Success
from fib_proxy.gateway.strategy import OperationStrategy, strategy_for
from shared.contracts import GatewayOperation, UpstreamErrorPayload

UNKNOWN_ERROR_CODE = "UNKNOWN_FIB_ERROR"
UNKNOWN_ERROR_TITLE = "Unknown FIB Error"
UNKNOWN_ERROR_MESSAGE = "Unknown FIB error"
EMBEDDED_ERRORS_STATUS = 400

_UNPARSED = object()


def _parse_json(content: bytes) -> Any:
    if not content:
        return _UNPARSED
    try:
        return json.loads(content)
    except ValueError:
        return _UNPARSED


def _has_embedded_errors(body: Any) -> bool:
    if not isinstance(body, dict):
        return False
    errors = body.get("errors")
    return isinstance(errors, list) and len(errors) > 0


def _synthetic_payload(detail: str) -> dict[str, Any]:
    return {
        "errors": [
            {"code": UNKNOWN_ERROR_CODE, "title": UNKNOWN_ERROR_TITLE, "detail": detail}
        ]
    }


def _error_payload(raw: RawResponse, body: Any) -> dict[str, Any]:
    if body is _UNPARSED:
        status_text = f"{raw.status_code} {raw.reason_phrase}".rstrip()
        return _synthetic_payload(f"Failed to parse error response body. Status: {status_text}")
    try:
        UpstreamErrorPayload.model_validate(body)
    except ValidationError:
        return _synthetic_payload(
            f"Unexpected error response format: {json.dumps(body, separators=(',', ':'))}"
        )
    return body


def _message_for(first_error: dict[str, Any]) -> str:
    for key in ("detail", "title", "code"):
        value = first_error.get(key)
        if value:
            return str(value)
    return UNKNOWN_ERROR_MESSAGE


def build_failure(http_status: int, payload: dict[str, Any]) -> Failure:
    errors = [item for item in payload.get("errors", []) if isinstance(item, dict)]
    first_error = errors[0] if errors else {}
    trace_id = payload.get("traceId")
    error_code = first_error.get("code")
    return Failure(
        http_status=http_status,
        message=_message_for(first_error),
        trace_id=str(trace_id) if trace_id is not None else None,
        error_code=str(error_code) if error_code is not None else None,
        error_details=errors,
    )


def _success_body(strategy: OperationStrategy, body: Any) -> Any:
    if strategy.success_message is not None:
        return {"message": strategy.success_message}
    if body is _UNPARSED:
        raise UpstreamProtocolError(
            f"{strategy.operation.value} succeeded upstream but returned no JSON body"
        )
    return body


def _is_success_status(strategy: OperationStrategy, raw: RawResponse) -> bool:
    if strategy.success_status is None:
        return raw.is_2xx
    return raw.status_code == strategy.success_status


def normalize(operation: GatewayOperation, raw: RawResponse) -> NormalizedOutcome:
    strategy = strategy_for(operation)
    body = _parse_json(raw.content)

    if not _is_success_status(strategy, raw):
        return build_failure(raw.status_code, _error_payload(raw, body))

    if operation is GatewayOperation.CHECK_STATUS and _has_embedded_errors(body):
        return build_failure(EMBEDDED_ERRORS_STATUS, body)

    return Success(http_status=strategy.client_status, body=_success_body(strategy, body))
