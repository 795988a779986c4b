from __future__ import annotations

import re
from typing import Any

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from shared.contracts.enums import DecliningReason, PaymentCategory, PaymentStatus

# Patterns are applied with fullmatch and accept ASCII digits only.
AMOUNT_PATTERN = re.compile(r"[0-9]+(\.00)?")
ISO8601_DURATION_PATTERN = re.compile(
    r"P(?=[0-9]|T[0-9])([0-9]+Y)?([0-9]+M)?([0-9]+W)?([0-9]+D)?"
    r"(T([0-9]+H)?([0-9]+M)?([0-9]+(\.[0-9]+)?S)?)?"
)
_ABSOLUTE_URL = TypeAdapter(AnyUrl)


def _check_absolute_url(value: str, message: str) -> str:
    try:
        _ABSOLUTE_URL.validate_python(value)
    except ValueError as exc:
        raise ValueError(message) from exc
    return value


def _check_duration(value: str) -> str:
    if not ISO8601_DURATION_PATTERN.fullmatch(value):
        raise ValueError("Must be a valid ISO 8601 duration string (e.g., P1D, PT1H30M)")
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MonetaryValue(CamelModel):
    amount: str
    currency: str

    @field_validator("amount")
    @classmethod
    def check_amount(cls, value: str) -> str:
        if not value:
            raise ValueError("Amount cannot be empty")
        if not AMOUNT_PATTERN.fullmatch(value):
            raise ValueError(
                'Amount must be a whole number string or end in .00 (e.g., "500", "123.00"). '
                'Fractional values (e.g., "500.50") are not allowed.'
            )
        return value

    @field_validator("currency")
    @classmethod
    def check_currency(cls, value: str) -> str:
        if len(value) != 3:
            raise ValueError("Currency must be a 3-letter code (e.g., IQD)")
        return value


class CreatePaymentRequest(CamelModel):
    monetary_value: MonetaryValue
    description: str | None = None
    status_callback_url: str | None = None
    redirect_uri: str | None = None
    expires_in: str | None = None
    refundable_for: str | None = None
    category: PaymentCategory | None = None

    @field_validator("status_callback_url")
    @classmethod
    def check_status_callback_url(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_absolute_url(value, "Invalid Status Callback URL format")

    @field_validator("redirect_uri")
    @classmethod
    def check_redirect_uri(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_absolute_url(value, "Invalid Redirect URI format")

    @field_validator("expires_in", "refundable_for")
    @classmethod
    def check_duration(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_duration(value)

    def to_upstream_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PaymentResponse(CamelModel):
    payment_id: str
    readable_code: str
    qr_code: str
    valid_until: str
    personal_app_link: str
    business_app_link: str
    corporate_app_link: str


class PayerInfo(CamelModel):
    name: str
    iban: str


class CheckPaymentStatusResponse(CamelModel):
    payment_id: str
    status: PaymentStatus
    paid_at: str | None = None
    amount: MonetaryValue | None = None
    paid_by: PayerInfo | None = None
    declining_reason: DecliningReason | None = None
    declined_at: str | None = None


class PaymentStatusCallback(BaseModel):
    id: str
    status: PaymentStatus


# The gateway is loose about scalar types in its error envelope.
ErrorScalar = str | int | float | bool | None


class UpstreamErrorDetail(CamelModel):
    model_config = ConfigDict(extra="allow")

    code: ErrorScalar = None
    title: ErrorScalar = None
    detail: ErrorScalar = None


class UpstreamErrorPayload(CamelModel):
    model_config = ConfigDict(extra="allow")

    trace_id: ErrorScalar = None
    errors: list[UpstreamErrorDetail] = Field(min_length=1)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(CamelModel):
    message: str
    trace_id: str | None = None
    error_code: str | None = None
    error_details: list[dict[str, Any]] | None = None

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ValidationErrorResponse(BaseModel):
    message: str
    errors: dict[str, list[str]] | None = None
