from __future__ import annotations

import time
from typing import Any

import httpx

from fib_proxy.core.config import GatewayConfig
from fib_proxy.core.errors import AuthError, GatewayTransportError
from fib_proxy.core.metrics import token_failures_total, token_request_duration
from shared.logging import UPSTREAM_STATUS, UPSTREAM_URL, get_logger

logger = get_logger(__name__)

MISSING_CREDENTIALS_MESSAGE = "missing credentials"
TOKEN_MISSING_MESSAGE = "token missing in response"
UNKNOWN_TOKEN_ERROR = "Unknown error occurred"


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class TokenProvider:
    """Fetches a client-credentials bearer token from the gateway.

    Tokens are valid for about 60 seconds, so every call re-authenticates and
    nothing is cached between requests.
    """

    def __init__(self, http_client: httpx.AsyncClient, config: GatewayConfig) -> None:
        self._http_client = http_client
        self._config = config

    async def get_access_token(self) -> str:
        if not self._config.has_credentials:
            token_failures_total.add(1, {"reason": "missing_credentials"})
            raise AuthError(MISSING_CREDENTIALS_MESSAGE)

        form = {
            "grant_type": self._config.grant_type,
            "client_id": self._config.client_id or "",
            "client_secret": self._config.client_secret or "",
        }
        start = time.perf_counter()
        try:
            response = await self._http_client.post(
                self._config.token_url,
                data=form,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except httpx.TransportError as exc:
            token_failures_total.add(1, {"reason": "transport"})
            raise GatewayTransportError(f"Token request failed: {exc}") from exc
        finally:
            token_request_duration.record((time.perf_counter() - start) * 1000)

        body = _json_or_none(response)
        if not response.is_success:
            upstream_error = UNKNOWN_TOKEN_ERROR
            if isinstance(body, dict) and body.get("error"):
                upstream_error = str(body["error"])
            token_failures_total.add(1, {"reason": "rejected"})
            logger.error(
                "token_request_rejected",
                extra={
                    "extra_fields": {
                        UPSTREAM_URL: self._config.token_url,
                        UPSTREAM_STATUS: response.status_code,
                        "upstream_error": upstream_error,
                    }
                },
            )
            raise AuthError(
                f"{upstream_error} ({response.status_code} - {response.reason_phrase})",
                upstream_status=response.status_code,
            )

        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            token_failures_total.add(1, {"reason": "token_missing"})
            raise AuthError(TOKEN_MISSING_MESSAGE, upstream_status=response.status_code)
        return str(token)
