from __future__ import annotations

import time
from typing import Any

import httpx

from fib_proxy.core.config import GatewayConfig
from fib_proxy.core.errors import GatewayTransportError
from fib_proxy.core.metrics import upstream_latency, upstream_transport_errors_total
from fib_proxy.gateway.outcomes import RawResponse
from fib_proxy.gateway.strategy import strategy_for
from shared.contracts import GatewayOperation
from shared.logging import OPERATION, PAYMENT_ID, UPSTREAM_URL, get_logger
from shared.observability import inject_headers

logger = get_logger(__name__)


class UpstreamDispatcher:
    def __init__(self, http_client: httpx.AsyncClient, config: GatewayConfig) -> None:
        self._http_client = http_client
        self._config = config

    def url_for(self, operation: GatewayOperation, payment_id: str | None = None) -> str:
        return f"{self._config.payments_url}{strategy_for(operation).path_for(payment_id)}"

    async def dispatch(
        self,
        operation: GatewayOperation,
        token: str,
        *,
        payment_id: str | None = None,
        body: dict[str, Any] | None = None,
    ) -> RawResponse:
        strategy = strategy_for(operation)
        url = self.url_for(operation, payment_id)
        headers = inject_headers(
            {"Authorization": f"Bearer {token}", "Cache-Control": "no-store"}
        )
        request_kwargs: dict[str, Any] = {"headers": headers}
        if strategy.sends_body:
            request_kwargs["json"] = body or {}

        start = time.perf_counter()
        try:
            response = await self._http_client.request(strategy.method, url, **request_kwargs)
        except httpx.TransportError as exc:
            upstream_transport_errors_total.add(1, {"operation": operation.value})
            logger.error(
                "upstream_transport_error",
                extra={
                    "extra_fields": {
                        OPERATION: operation.value,
                        PAYMENT_ID: payment_id or "",
                        UPSTREAM_URL: url,
                    }
                },
            )
            raise GatewayTransportError(f"{operation.value} request failed: {exc}") from exc
        finally:
            upstream_latency.record(
                (time.perf_counter() - start) * 1000, {"operation": operation.value}
            )

        return RawResponse(
            status_code=response.status_code,
            content=response.content,
            reason_phrase=response.reason_phrase,
        )
