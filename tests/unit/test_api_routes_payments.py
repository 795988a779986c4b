from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient
from fib_proxy.api import dependencies
from fib_proxy.api.routes_payments import router
from fib_proxy.gateway.strategy import CANCELLED_MESSAGE, REFUND_INITIATED_MESSAGE

from tests.helpers import (
    FakeGateway,
    assert_error_payload,
    assert_validation_payload,
    build_app_with_router,
    create_test_client,
    make_create_payment_payload,
    make_error_payload,
    make_gateway_config,
    make_payment_id,
    make_payment_response,
    make_status_response,
)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def payments_client(gateway: FakeGateway) -> Iterator[TestClient]:
    app = build_app_with_router(router)
    http_client = gateway.client()
    overrides = {
        dependencies.get_http_client: lambda: http_client,
        dependencies.get_gateway_config: lambda: make_gateway_config(),
    }
    with create_test_client(app, overrides=overrides) as client:
        yield client


def test_create_payment_returns_201_with_gateway_body(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    body = make_payment_response()
    gateway.payment_status = 201
    gateway.payment_body = body

    response = payments_client.post("/payment/create", json=make_create_payment_payload())

    assert response.status_code == 201
    assert response.json() == body
    assert gateway.payment_requests[0].headers["Authorization"] == "Bearer token-1"


def test_create_payment_rejects_malformed_json(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    response = payments_client.post(
        "/payment/create", content=b"{", headers={"Content-Type": "application/json"}
    )

    assert_validation_payload(response, expected_message="Invalid JSON format in request body")
    assert gateway.token_requests == []


def test_create_payment_reports_field_errors(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    response = payments_client.post(
        "/payment/create",
        json=make_create_payment_payload(amount="500.50", currency="IQDX"),
    )

    assert_validation_payload(
        response, expected_message="Invalid request body", expected_fields={"monetaryValue"}
    )
    assert len(response.json()["errors"]["monetaryValue"]) == 2
    assert gateway.token_requests == []
    assert gateway.payment_requests == []


def test_create_payment_surfaces_upstream_error_with_upstream_status(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    gateway.payment_status = 422
    gateway.payment_body = make_error_payload(code="INVALID_AMOUNT", detail="Amount too low")

    response = payments_client.post("/payment/create", json=make_create_payment_payload())

    assert response.status_code == 422
    assert response.json() == {
        "message": "Amount too low",
        "traceId": "trace-1",
        "errorCode": "INVALID_AMOUNT",
        "errorDetails": [
            {"code": "INVALID_AMOUNT", "title": "Payment error", "detail": "Amount too low"}
        ],
    }


def test_cancel_payment_maps_204_to_200(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    payment_id = make_payment_id()
    gateway.payment_status = 204

    response = payments_client.post(f"/payment/{payment_id}/cancel")

    assert response.status_code == 200
    assert response.json() == {"message": CANCELLED_MESSAGE}
    assert gateway.payment_requests[0].url.path.endswith(f"/payments/{payment_id}/cancel")


def test_cancel_payment_rejects_invalid_payment_id(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    response = payments_client.post("/payment/not-a-uuid/cancel")

    assert_validation_payload(
        response, expected_message="Invalid payment ID format", expected_fields={"paymentId"}
    )
    assert gateway.token_requests == []


def test_refund_payment_returns_202(payments_client: TestClient, gateway: FakeGateway) -> None:
    gateway.payment_status = 202

    response = payments_client.post(f"/payment/{make_payment_id()}/refund")

    assert response.status_code == 202
    assert response.json() == {"message": REFUND_INITIATED_MESSAGE}


def test_refund_payment_unexpected_200_is_reported_as_failure(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    gateway.payment_status = 200
    gateway.payment_body = {"status": "ok"}

    response = payments_client.post(f"/payment/{make_payment_id()}/refund")

    assert response.status_code == 200
    assert response.json()["errorCode"] == "UNKNOWN_FIB_ERROR"


def test_refund_payment_unexpected_204_keeps_status_without_body(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    gateway.payment_status = 204

    response = payments_client.post(f"/payment/{make_payment_id()}/refund")

    assert response.status_code == 204
    assert response.content == b""


def test_check_status_returns_gateway_body(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    payment_id = make_payment_id()
    gateway.payment_body = make_status_response(payment_id)

    response = payments_client.get(f"/payment/check-status/{payment_id}")

    assert response.status_code == 200
    assert response.json() == make_status_response(payment_id)
    assert gateway.payment_requests[0].method == "GET"


def test_check_status_embedded_errors_become_400(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    gateway.payment_body = {"traceId": "trace-5", "errors": [{"code": "X", "title": "Broken"}]}

    response = payments_client.get(f"/payment/check-status/{make_payment_id()}")

    assert_error_payload(response, expected_status=400, expected_message="Broken")
    assert response.json()["traceId"] == "trace-5"


def test_token_failure_returns_service_configuration_error(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    gateway.token_status = 401
    gateway.token_body = {"error": "invalid_client"}

    response = payments_client.get(f"/payment/check-status/{make_payment_id()}")

    assert response.status_code == 500
    assert response.json() == {"message": "Service configuration error"}
    assert gateway.payment_requests == []


def test_transport_failure_returns_generic_500(
    payments_client: TestClient, gateway: FakeGateway
) -> None:
    gateway.payment_error = httpx.ConnectError("connection reset")

    response = payments_client.post(f"/payment/{make_payment_id()}/cancel")

    assert_error_payload(response, expected_status=500, expected_message="Internal Server Error")
    assert "connection reset" in response.json()["error"]


def test_status_callback_is_acknowledged(payments_client: TestClient) -> None:
    response = payments_client.post(
        "/payment/status-callback", json={"id": make_payment_id(), "status": "PAID"}
    )

    assert response.status_code == 202
    assert response.json() == {"message": "Callback received"}


def test_status_callback_rejects_invalid_body(payments_client: TestClient) -> None:
    response = payments_client.post("/payment/status-callback", json={"status": "PAID"})

    assert_validation_payload(
        response, expected_message="Invalid request body", expected_fields={"id"}
    )
