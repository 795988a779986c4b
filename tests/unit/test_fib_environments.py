from __future__ import annotations

import pytest

from shared.constants import (
    get_environment_profile,
    payments_url_for,
    resolve_environment,
    supported_environments,
    token_url_for,
)
from shared.contracts import GatewayEnvironment


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("dev", GatewayEnvironment.DEV),
        ("PROD", GatewayEnvironment.PROD),
        (" Stage ", GatewayEnvironment.STAGE),
        ("production", GatewayEnvironment.STAGE),
        ("", GatewayEnvironment.STAGE),
        (None, GatewayEnvironment.STAGE),
    ],
)
def test_resolve_environment_defaults_to_stage(
    raw: str | None, expected: GatewayEnvironment
) -> None:
    assert resolve_environment(raw) is expected


def test_environment_profiles_map_to_fib_domains() -> None:
    assert get_environment_profile(GatewayEnvironment.PROD).base_url == "https://fib.prod.fib.iq"
    assert get_environment_profile(GatewayEnvironment.STAGE).base_url == "https://fib.stage.fib.iq"
    assert get_environment_profile(GatewayEnvironment.DEV).base_url == "https://fib.dev.fib.iq"
    assert supported_environments() == ("prod", "stage", "dev")


def test_endpoint_urls_are_built_from_base_url() -> None:
    assert token_url_for("https://fib.dev.fib.iq/") == (
        "https://fib.dev.fib.iq/auth/realms/fib-online-shop/protocol/openid-connect/token"
    )
    assert payments_url_for("https://fib.dev.fib.iq") == (
        "https://fib.dev.fib.iq/protected/v1/payments"
    )
