from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from fib_proxy.api.dependencies import (
    get_cancel_payment_use_case,
    get_check_payment_status_use_case,
    get_create_payment_use_case,
    get_record_status_callback_use_case,
    get_refund_payment_use_case,
)
from fib_proxy.gateway.outcomes import Failure, NormalizedOutcome
from fib_proxy.use_cases.cancel_payment import CancelPaymentUseCase
from fib_proxy.use_cases.check_payment_status import CheckPaymentStatusUseCase
from fib_proxy.use_cases.create_payment import CreatePaymentUseCase
from fib_proxy.use_cases.record_status_callback import RecordStatusCallbackUseCase
from fib_proxy.use_cases.refund_payment import RefundPaymentUseCase
from shared.contracts import (
    CheckPaymentStatusResponse,
    ErrorResponse,
    MessageResponse,
    PaymentResponse,
    ValidationErrorResponse,
)

router = APIRouter(prefix="/payment", tags=["payments"])

_BODILESS_STATUSES = {204, 205, 304}
_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ValidationErrorResponse},
    500: {"model": MessageResponse},
    "default": {"model": ErrorResponse},
}


def outcome_response(outcome: NormalizedOutcome) -> Response:
    """Render a normalized outcome, keeping the status it carries."""
    if outcome.http_status < 200 or outcome.http_status in _BODILESS_STATUSES:
        return Response(status_code=outcome.http_status)
    if isinstance(outcome, Failure):
        return JSONResponse(status_code=outcome.http_status, content=outcome.to_body())
    return JSONResponse(status_code=outcome.http_status, content=outcome.body)


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": PaymentResponse}, **_ERROR_RESPONSES},
)
async def create_payment(
    request: Request,
    use_case: Annotated[CreatePaymentUseCase, Depends(get_create_payment_use_case)],
) -> Response:
    return outcome_response(await use_case.execute(await request.body()))


@router.post(
    "/{payment_id}/cancel",
    responses={200: {"model": MessageResponse}, **_ERROR_RESPONSES},
)
async def cancel_payment(
    payment_id: str,
    use_case: Annotated[CancelPaymentUseCase, Depends(get_cancel_payment_use_case)],
) -> Response:
    return outcome_response(await use_case.execute(payment_id))


@router.post(
    "/{payment_id}/refund",
    status_code=status.HTTP_202_ACCEPTED,
    responses={202: {"model": MessageResponse}, **_ERROR_RESPONSES},
)
async def refund_payment(
    payment_id: str,
    use_case: Annotated[RefundPaymentUseCase, Depends(get_refund_payment_use_case)],
) -> Response:
    return outcome_response(await use_case.execute(payment_id))


@router.get(
    "/check-status/{payment_id}",
    responses={200: {"model": CheckPaymentStatusResponse}, **_ERROR_RESPONSES},
)
async def check_payment_status(
    payment_id: str,
    use_case: Annotated[CheckPaymentStatusUseCase, Depends(get_check_payment_status_use_case)],
) -> Response:
    return outcome_response(await use_case.execute(payment_id))


@router.post(
    "/status-callback",
    status_code=status.HTTP_202_ACCEPTED,
    responses={202: {"model": MessageResponse}, 400: {"model": ValidationErrorResponse}},
)
async def receive_status_callback(
    request: Request,
    use_case: Annotated[RecordStatusCallbackUseCase, Depends(get_record_status_callback_use_case)],
) -> Response:
    return outcome_response(await use_case.execute(await request.body()))
