from __future__ import annotations

from dataclasses import dataclass

from shared.contracts import GatewayOperation

CANCELLED_MESSAGE = "Payment cancelled successfully"
REFUND_INITIATED_MESSAGE = (
    "Payment refund request initiated. "
    "Check payment status after a few minutes to confirm the refund."
)


@dataclass(frozen=True)
class OperationStrategy:
    """How one gateway operation is called and what counts as success.

    ``success_status`` is the only upstream status accepted as success; ``None``
    means any 2xx (check-status). ``client_status`` is the status returned to
    our caller on success and ``success_message`` replaces the upstream body
    when set.
    """

    operation: GatewayOperation
    method: str
    path_suffix: str
    success_status: int | None
    client_status: int
    success_message: str | None = None
    sends_body: bool = False
    requires_payment_id: bool = True

    def path_for(self, payment_id: str | None) -> str:
        if not self.requires_payment_id:
            return self.path_suffix
        if not payment_id:
            raise ValueError(f"{self.operation.value} requires a payment id")
        return f"/{payment_id}{self.path_suffix}"


_STRATEGIES = {
    GatewayOperation.CREATE: OperationStrategy(
        operation=GatewayOperation.CREATE,
        method="POST",
        path_suffix="",
        success_status=201,
        client_status=201,
        sends_body=True,
        requires_payment_id=False,
    ),
    GatewayOperation.CANCEL: OperationStrategy(
        operation=GatewayOperation.CANCEL,
        method="POST",
        path_suffix="/cancel",
        success_status=204,
        client_status=200,
        success_message=CANCELLED_MESSAGE,
    ),
    GatewayOperation.REFUND: OperationStrategy(
        operation=GatewayOperation.REFUND,
        method="POST",
        path_suffix="/refund",
        success_status=202,
        client_status=202,
        success_message=REFUND_INITIATED_MESSAGE,
    ),
    GatewayOperation.CHECK_STATUS: OperationStrategy(
        operation=GatewayOperation.CHECK_STATUS,
        method="GET",
        path_suffix="/status",
        success_status=None,
        client_status=200,
    ),
}


def strategy_for(operation: GatewayOperation) -> OperationStrategy:
    return _STRATEGIES[operation]
