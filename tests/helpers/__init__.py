from tests.helpers.app import build_app_with_router, create_test_client, override_dependencies
from tests.helpers.assertions import assert_error_payload, assert_validation_payload
from tests.helpers.factories import (
    TEST_BASE_URL,
    make_create_payment_payload,
    make_error_payload,
    make_gateway_config,
    make_payment_id,
    make_payment_response,
    make_raw_response,
    make_status_response,
)
from tests.helpers.fakes import FakeDispatcher, FakeGateway, FakeTokenProvider, auth_error

__all__ = [
    "FakeDispatcher",
    "FakeGateway",
    "FakeTokenProvider",
    "TEST_BASE_URL",
    "assert_error_payload",
    "assert_validation_payload",
    "auth_error",
    "build_app_with_router",
    "create_test_client",
    "make_create_payment_payload",
    "make_error_payload",
    "make_gateway_config",
    "make_payment_id",
    "make_payment_response",
    "make_raw_response",
    "make_status_response",
    "override_dependencies",
]
