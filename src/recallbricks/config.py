"""Configuration objects for the RecallBricks Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .errors import AuthConfigError, ConfigurationError

DEFAULT_BASE_URL = "http://localhost:10002/api/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_MAX_RETRY_DELAY = 10.0


class AuthMode(str, Enum):
    API_KEY = "api_key"
    SERVICE_TOKEN = "service_token"

    @property
    def header(self) -> str:
        return "X-Service-Token" if self is AuthMode.SERVICE_TOKEN else "X-API-Key"


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


@dataclass(frozen=True)
class ClientConfig:
    """Connection, auth and retry settings for a client.

    Exactly one of ``api_key`` or ``service_token`` must be set. Durations are
    in seconds. Passing ``None`` for a retry knob selects its default; ``0`` is
    kept as given, so ``max_retries=0`` means a single attempt.
    """

    api_key: Optional[str] = None
    service_token: Optional[str] = None
    base_url: Optional[str] = None
    timeout: Optional[float] = None
    max_retries: Optional[int] = None
    retry_delay: Optional[float] = None
    max_retry_delay: Optional[float] = None
    autonomous_base_url: Optional[str] = None
    user_agent: str = "recallbricks-python/0.1.0"
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        has_key = _present(self.api_key)
        has_token = _present(self.service_token)
        if not has_key and not has_token:
            raise AuthConfigError(
                "Either api_key or service_token must be provided",
                reason="missing",
                code="MISSING_AUTH",
            )
        if has_key and has_token:
            raise AuthConfigError(
                "Provide either api_key or service_token, not both",
                reason="conflict",
                code="INVALID_AUTH_CONFIG",
            )

        # frozen: defaults go in through object.__setattr__
        defaults = {
            "base_url": DEFAULT_BASE_URL,
            "timeout": DEFAULT_TIMEOUT,
            "max_retries": DEFAULT_MAX_RETRIES,
            "retry_delay": DEFAULT_RETRY_DELAY,
            "max_retry_delay": DEFAULT_MAX_RETRY_DELAY,
        }
        for name, default in defaults.items():
            if getattr(self, name) is None or getattr(self, name) == "":
                object.__setattr__(self, name, default)

        if self.timeout <= 0:
            raise ConfigurationError("timeout must be greater than 0")
        if not isinstance(self.max_retries, int) or isinstance(self.max_retries, bool) or self.max_retries < 0:
            raise ConfigurationError("max_retries must be a non-negative integer")
        if self.retry_delay < 0:
            raise ConfigurationError("retry_delay must not be negative")
        if self.max_retry_delay < 0:
            raise ConfigurationError("max_retry_delay must not be negative")

    @property
    def auth_mode(self) -> AuthMode:
        return AuthMode.SERVICE_TOKEN if _present(self.service_token) else AuthMode.API_KEY

    @property
    def credential(self) -> str:
        if self.auth_mode is AuthMode.SERVICE_TOKEN:
            return self.service_token  # type: ignore[return-value]
        return self.api_key  # type: ignore[return-value]

    def __repr__(self) -> str:
        return (
            f"ClientConfig(auth_mode={self.auth_mode.value!r}, base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, max_retries={self.max_retries!r})"
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """Build a config from ``RECALLBRICKS_*`` environment variables."""
        env = os.environ
        values: Dict[str, Any] = {
            "api_key": env.get("RECALLBRICKS_API_KEY"),
            "service_token": env.get("RECALLBRICKS_SERVICE_TOKEN"),
            "base_url": env.get("RECALLBRICKS_BASE_URL"),
            "autonomous_base_url": env.get("RECALLBRICKS_AUTONOMOUS_URL"),
        }

        numeric = {
            "timeout": ("RECALLBRICKS_TIMEOUT", float),
            "max_retries": ("RECALLBRICKS_MAX_RETRIES", int),
            "retry_delay": ("RECALLBRICKS_RETRY_DELAY", float),
            "max_retry_delay": ("RECALLBRICKS_MAX_RETRY_DELAY", float),
        }
        for name, (var, cast) in numeric.items():
            raw = env.get(var)
            if raw is None or not raw.strip():
                continue
            try:
                values[name] = cast(raw.strip())
            except ValueError as exc:
                raise ConfigurationError(f"{var} must be a number") from exc

        values.update(overrides)
        return cls(**values)


__all__ = [
    "AuthMode",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MAX_RETRY_DELAY",
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_TIMEOUT",
]
