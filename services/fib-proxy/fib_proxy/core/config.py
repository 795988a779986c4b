from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.constants import (
    get_environment_profile,
    payments_url_for,
    resolve_environment,
    supported_environments,
    token_url_for,
)
from shared.contracts import GatewayEnvironment

DEFAULT_GRANT_TYPE = "client_credentials"


@dataclass(frozen=True)
class GatewayConfig:
    """Read-only gateway settings handed to the token provider and dispatcher."""

    environment: GatewayEnvironment
    base_url: str
    client_id: str | None
    client_secret: str | None
    grant_type: str = DEFAULT_GRANT_TYPE
    timeout_seconds: float | None = None

    @property
    def token_url(self) -> str:
        return token_url_for(self.base_url)

    @property
    def payments_url(self) -> str:
        return payments_url_for(self.base_url)

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id) and bool(self.client_secret)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    service_name: str = "fib-proxy"
    app_env: str = "local"
    log_level: str = "INFO"
    cors_allowed_origins_csv: str = "http://localhost:3000,http://127.0.0.1:3000"

    client_id: str | None = None
    client_secret: str | None = None
    grant_type: str | None = None
    fib_gateway_environment: str | None = None
    fib_gateway_base_url: str | None = None
    upstream_timeout_seconds: float | None = Field(default=None, gt=0)

    @property
    def gateway_environment(self) -> GatewayEnvironment:
        return resolve_environment(self.fib_gateway_environment)

    @property
    def gateway_environment_recognized(self) -> bool:
        """False when a non-empty environment name had to fall back to the default."""
        raw = (self.fib_gateway_environment or "").strip().lower()
        return not raw or raw in supported_environments()

    @property
    def resolved_gateway_base_url(self) -> str:
        if self.fib_gateway_base_url:
            return self.fib_gateway_base_url.rstrip("/")
        return get_environment_profile(self.gateway_environment).base_url

    @property
    def cors_allowed_origins(self) -> list[str]:
        return [item.strip() for item in self.cors_allowed_origins_csv.split(",") if item.strip()]

    def gateway_config(self) -> GatewayConfig:
        return GatewayConfig(
            environment=self.gateway_environment,
            base_url=self.resolved_gateway_base_url,
            client_id=self.client_id,
            client_secret=self.client_secret,
            grant_type=self.grant_type or DEFAULT_GRANT_TYPE,
            timeout_seconds=self.upstream_timeout_seconds,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
