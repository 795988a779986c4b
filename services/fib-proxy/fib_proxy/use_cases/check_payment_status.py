from __future__ import annotations

from fib_proxy.gateway.outcomes import NormalizedOutcome
from fib_proxy.use_cases.base import GatewayOperationUseCase
from fib_proxy.validation.payment import validate_payment_id
from shared.contracts import GatewayOperation


class CheckPaymentStatusUseCase(GatewayOperationUseCase):
    """Always asks the gateway; no status is stored or cached here."""

    operation = GatewayOperation.CHECK_STATUS

    async def execute(self, payment_id: str) -> NormalizedOutcome:
        return await self._forward(payment_id=validate_payment_id(payment_id))
