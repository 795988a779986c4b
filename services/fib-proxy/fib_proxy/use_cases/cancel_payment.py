from __future__ import annotations

from fib_proxy.gateway.outcomes import NormalizedOutcome
from fib_proxy.use_cases.base import GatewayOperationUseCase
from fib_proxy.validation.payment import validate_payment_id
from shared.contracts import GatewayOperation


class CancelPaymentUseCase(GatewayOperationUseCase):
    """Cancels a payment that has not been paid yet."""

    operation = GatewayOperation.CANCEL

    async def execute(self, payment_id: str) -> NormalizedOutcome:
        return await self._forward(payment_id=validate_payment_id(payment_id))
