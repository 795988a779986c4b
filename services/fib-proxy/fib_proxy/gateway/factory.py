from __future__ import annotations

import httpx

from fib_proxy.core.config import GatewayConfig


class GatewayClientFactory:
    """Builds the pooled HTTP client shared by the token provider and dispatcher."""

    def __init__(self, config: GatewayConfig) -> None:
        self._config = config

    def create(self) -> httpx.AsyncClient:
        if self._config.timeout_seconds is None:
            return httpx.AsyncClient()
        return httpx.AsyncClient(timeout=self._config.timeout_seconds)
