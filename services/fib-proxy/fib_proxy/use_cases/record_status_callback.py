from __future__ import annotations

from fib_proxy.core.metrics import status_callbacks_total
from fib_proxy.gateway.outcomes import Success
from fib_proxy.validation.payment import parse_json_body, validate_status_callback
from shared.logging import PAYMENT_ID, get_logger

logger = get_logger(__name__)

CALLBACK_RECEIVED_MESSAGE = "Callback received"


class RecordStatusCallbackUseCase:
    """Accepts the gateway's status notification and logs it."""

    async def execute(self, raw_body: bytes) -> Success:
        callback = validate_status_callback(parse_json_body(raw_body))
        status_callbacks_total.add(1, {"status": callback.status.value})
        logger.info(
            "payment_status_callback",
            extra={"extra_fields": {PAYMENT_ID: callback.id, "status": callback.status.value}},
        )
        return Success(http_status=202, body={"message": CALLBACK_RECEIVED_MESSAGE})
