from __future__ import annotations

from dataclasses import dataclass

from shared.contracts import GatewayEnvironment

DEFAULT_ENVIRONMENT = GatewayEnvironment.STAGE
TOKEN_PATH = "/auth/realms/fib-online-shop/protocol/openid-connect/token"
PAYMENTS_PATH = "/protected/v1/payments"


@dataclass(frozen=True)
class EnvironmentProfile:
    environment: GatewayEnvironment
    domain: str

    @property
    def base_url(self) -> str:
        return f"https://{self.domain}"


_ENVIRONMENT_PROFILES = {
    GatewayEnvironment.PROD: EnvironmentProfile(GatewayEnvironment.PROD, "fib.prod.fib.iq"),
    GatewayEnvironment.STAGE: EnvironmentProfile(GatewayEnvironment.STAGE, "fib.stage.fib.iq"),
    GatewayEnvironment.DEV: EnvironmentProfile(GatewayEnvironment.DEV, "fib.dev.fib.iq"),
}


def resolve_environment(raw: str | None) -> GatewayEnvironment:
    """Map a raw environment name onto a known gateway environment.

    Matching is case-insensitive; empty or unknown names fall back to staging.
    """
    normalized = (raw or "").strip().lower()
    for environment in _ENVIRONMENT_PROFILES:
        if environment.value == normalized:
            return environment
    return DEFAULT_ENVIRONMENT


def get_environment_profile(environment: GatewayEnvironment) -> EnvironmentProfile:
    return _ENVIRONMENT_PROFILES[environment]


def token_url_for(base_url: str) -> str:
    return f"{base_url.rstrip('/')}{TOKEN_PATH}"


def payments_url_for(base_url: str) -> str:
    return f"{base_url.rstrip('/')}{PAYMENTS_PATH}"


def supported_environments() -> tuple[str, ...]:
    return tuple(environment.value for environment in _ENVIRONMENT_PROFILES)
