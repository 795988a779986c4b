from shared.constants.fib_environments import (
    DEFAULT_ENVIRONMENT,
    EnvironmentProfile,
    get_environment_profile,
    payments_url_for,
    resolve_environment,
    supported_environments,
    token_url_for,
)

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "EnvironmentProfile",
    "get_environment_profile",
    "payments_url_for",
    "resolve_environment",
    "supported_environments",
    "token_url_for",
]
