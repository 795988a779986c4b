from __future__ import annotations

from fib_proxy.gateway.outcomes import NormalizedOutcome
from fib_proxy.use_cases.base import GatewayOperationUseCase
from fib_proxy.validation.payment import parse_json_body, validate_create_request
from shared.contracts import GatewayOperation


class CreatePaymentUseCase(GatewayOperationUseCase):
    operation = GatewayOperation.CREATE

    async def execute(self, raw_body: bytes) -> NormalizedOutcome:
        payload = validate_create_request(parse_json_body(raw_body))
        return await self._forward(body=payload.to_upstream_payload())
