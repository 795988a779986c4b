from __future__ import annotations

import pytest
from pydantic import ValidationError

from shared.contracts import (
    CreatePaymentRequest,
    MonetaryValue,
    PaymentCategory,
    UpstreamErrorPayload,
)


@pytest.mark.parametrize("amount", ["0", "500", "123.00", "1000000"])
def test_monetary_value_accepts_whole_amount_strings(amount: str) -> None:
    assert MonetaryValue(amount=amount, currency="IQD").amount == amount


@pytest.mark.parametrize(
    "amount",
    ["500.50", "abc", "", "12.0", "-5", " 5", "5.000", "500\n", "123.00\n", "\u0665\u0660\u0660"],
)
def test_monetary_value_rejects_fractional_or_malformed_amounts(amount: str) -> None:
    with pytest.raises(ValidationError):
        MonetaryValue(amount=amount, currency="IQD")


def test_monetary_value_rejects_numeric_amount() -> None:
    with pytest.raises(ValidationError):
        MonetaryValue.model_validate({"amount": 500, "currency": "IQD"})


@pytest.mark.parametrize("currency", ["IQ", "IQDD", ""])
def test_monetary_value_requires_three_character_currency(currency: str) -> None:
    with pytest.raises(ValidationError, match="Currency must be a 3-letter code"):
        MonetaryValue(amount="500", currency=currency)


@pytest.mark.parametrize("duration", ["P1D", "PT1H30M", "P1Y2M3W4DT5H6M7.5S", "PT0.5S", "P2W"])
def test_create_payment_request_accepts_iso8601_durations(duration: str) -> None:
    request = CreatePaymentRequest.model_validate(
        {"monetaryValue": {"amount": "1", "currency": "IQD"}, "expiresIn": duration}
    )
    assert request.expires_in == duration


@pytest.mark.parametrize(
    "duration", ["P", "PT", "1D", "P1.5D", "PT1H30", "P1DT1X", "P1D\n", "P\u0661D", "PT\u0661H"]
)
def test_create_payment_request_rejects_invalid_durations(duration: str) -> None:
    with pytest.raises(ValidationError):
        CreatePaymentRequest.model_validate(
            {"monetaryValue": {"amount": "1", "currency": "IQD"}, "refundableFor": duration}
        )


def test_create_payment_request_keeps_urls_verbatim_and_drops_absent_fields() -> None:
    request = CreatePaymentRequest.model_validate(
        {
            "monetaryValue": {"amount": "500.00", "currency": "IQD"},
            "statusCallbackUrl": "https://shop.example/fib/callback",
            "redirectUri": "https://shop.example",
            "category": "ECOMMERCE",
            "unknownField": "ignored",
        }
    )

    assert request.category is PaymentCategory.ECOMMERCE
    assert request.to_upstream_payload() == {
        "monetaryValue": {"amount": "500.00", "currency": "IQD"},
        "statusCallbackUrl": "https://shop.example/fib/callback",
        "redirectUri": "https://shop.example",
        "category": "ECOMMERCE",
    }


def test_create_payment_request_rejects_relative_callback_url() -> None:
    with pytest.raises(ValidationError, match="Invalid Status Callback URL format"):
        CreatePaymentRequest.model_validate(
            {
                "monetaryValue": {"amount": "1", "currency": "IQD"},
                "statusCallbackUrl": "/fib/callback",
            }
        )


def test_upstream_error_payload_requires_non_empty_errors() -> None:
    with pytest.raises(ValidationError):
        UpstreamErrorPayload.model_validate({"traceId": "t-1", "errors": []})

    payload = UpstreamErrorPayload.model_validate(
        {"traceId": "t-1", "errors": [{"code": "X", "extra": 1}]}
    )
    assert payload.trace_id == "t-1"
    assert payload.errors[0].code == "X"


def test_upstream_error_payload_accepts_numeric_codes_and_trace_id() -> None:
    payload = UpstreamErrorPayload.model_validate(
        {"traceId": 123, "errors": [{"code": 1001, "detail": "x"}]}
    )

    assert payload.trace_id == 123
    assert payload.errors[0].code == 1001
