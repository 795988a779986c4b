from __future__ import annotations

from typing import Any

from opentelemetry import trace

from fib_proxy.core.errors import AuthError
from fib_proxy.core.metrics import upstream_failures_total
from fib_proxy.gateway.dispatcher import UpstreamDispatcher
from fib_proxy.gateway.normalizer import normalize
from fib_proxy.gateway.outcomes import Failure, NormalizedOutcome
from fib_proxy.gateway.token_provider import TokenProvider
from shared.contracts import ErrorCategory, GatewayOperation
from shared.logging import (
    ERROR_CODE,
    ERRORS,
    OPERATION,
    PAYMENT_ID,
    UPSTREAM_STATUS,
    UPSTREAM_TRACE_ID,
    UPSTREAM_URL,
    get_logger,
    update_correlation_context,
)
from shared.observability import attributes

logger = get_logger(__name__)


class GatewayOperationUseCase:
    """Token -> dispatch -> normalize for one gateway operation.

    Subclasses validate their input first and then call ``_forward``; any
    exception raised here is left to the registered error handlers.
    """

    operation: GatewayOperation

    def __init__(self, token_provider: TokenProvider, dispatcher: UpstreamDispatcher) -> None:
        self._token_provider = token_provider
        self._dispatcher = dispatcher

    def _log_context(self, payment_id: str | None) -> dict[str, Any]:
        return {
            OPERATION: self.operation.value,
            PAYMENT_ID: payment_id or "",
            UPSTREAM_URL: self._dispatcher.url_for(self.operation, payment_id),
        }

    async def _forward(
        self, *, payment_id: str | None = None, body: dict[str, Any] | None = None
    ) -> NormalizedOutcome:
        update_correlation_context(
            {OPERATION: self.operation.value, PAYMENT_ID: payment_id or ""}
        )
        span = trace.get_current_span()
        span.set_attribute(attributes.OPERATION, self.operation.value)
        if payment_id:
            span.set_attribute(attributes.PAYMENT_ID, payment_id)

        try:
            token = await self._token_provider.get_access_token()
        except AuthError as exc:
            logger.error(
                "token_acquisition_failed",
                extra={
                    "extra_fields": {
                        **self._log_context(payment_id),
                        "error_category": exc.category.value,
                        "reason": exc.message,
                    }
                },
            )
            raise

        raw = await self._dispatcher.dispatch(
            self.operation, token, payment_id=payment_id, body=body
        )
        span.set_attribute(attributes.UPSTREAM_STATUS, raw.status_code)
        outcome = normalize(self.operation, raw)

        if isinstance(outcome, Failure):
            self._record_failure(outcome, raw.status_code, payment_id)
        else:
            span.set_attribute(attributes.OUTCOME, "success")
        return outcome

    def _record_failure(
        self, failure: Failure, upstream_status: int, payment_id: str | None
    ) -> None:
        span = trace.get_current_span()
        span.set_attribute(attributes.OUTCOME, "failure")
        if failure.trace_id:
            span.set_attribute(attributes.UPSTREAM_TRACE_ID, failure.trace_id)
        upstream_failures_total.add(
            1, {"operation": self.operation.value, "status_code": failure.http_status}
        )
        logger.warning(
            "upstream_failure",
            extra={
                "extra_fields": {
                    **self._log_context(payment_id),
                    "error_category": ErrorCategory.UPSTREAM_ERROR.value,
                    UPSTREAM_STATUS: upstream_status,
                    UPSTREAM_TRACE_ID: failure.trace_id,
                    ERROR_CODE: failure.error_code,
                    ERRORS: failure.error_details,
                }
            },
        )
