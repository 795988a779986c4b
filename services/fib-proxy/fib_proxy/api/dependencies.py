from __future__ import annotations

from typing import Annotated

import httpx
from fastapi import Depends, Request

from fib_proxy.core.config import GatewayConfig
from fib_proxy.gateway.dispatcher import UpstreamDispatcher
from fib_proxy.gateway.token_provider import TokenProvider
from fib_proxy.use_cases.cancel_payment import CancelPaymentUseCase
from fib_proxy.use_cases.check_payment_status import CheckPaymentStatusUseCase
from fib_proxy.use_cases.create_payment import CreatePaymentUseCase
from fib_proxy.use_cases.record_status_callback import RecordStatusCallbackUseCase
from fib_proxy.use_cases.refund_payment import RefundPaymentUseCase


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_gateway_config(request: Request) -> GatewayConfig:
    return request.app.state.gateway_config


def get_token_provider(
    http_client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    config: Annotated[GatewayConfig, Depends(get_gateway_config)],
) -> TokenProvider:
    return TokenProvider(http_client, config)


def get_dispatcher(
    http_client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    config: Annotated[GatewayConfig, Depends(get_gateway_config)],
) -> UpstreamDispatcher:
    return UpstreamDispatcher(http_client, config)


def get_create_payment_use_case(
    token_provider: Annotated[TokenProvider, Depends(get_token_provider)],
    dispatcher: Annotated[UpstreamDispatcher, Depends(get_dispatcher)],
) -> CreatePaymentUseCase:
    return CreatePaymentUseCase(token_provider, dispatcher)


def get_cancel_payment_use_case(
    token_provider: Annotated[TokenProvider, Depends(get_token_provider)],
    dispatcher: Annotated[UpstreamDispatcher, Depends(get_dispatcher)],
) -> CancelPaymentUseCase:
    return CancelPaymentUseCase(token_provider, dispatcher)


def get_refund_payment_use_case(
    token_provider: Annotated[TokenProvider, Depends(get_token_provider)],
    dispatcher: Annotated[UpstreamDispatcher, Depends(get_dispatcher)],
) -> RefundPaymentUseCase:
    return RefundPaymentUseCase(token_provider, dispatcher)


def get_check_payment_status_use_case(
    token_provider: Annotated[TokenProvider, Depends(get_token_provider)],
    dispatcher: Annotated[UpstreamDispatcher, Depends(get_dispatcher)],
) -> CheckPaymentStatusUseCase:
    return CheckPaymentStatusUseCase(token_provider, dispatcher)


def get_record_status_callback_use_case() -> RecordStatusCallbackUseCase:
    return RecordStatusCallbackUseCase()
