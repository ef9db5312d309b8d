"""Facade configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support and the LOGFIRE_ prefix (e.g. LOGFIRE_TOKEN). The token
is not validated here; initialize() decides whether a missing token is
fatal so the error can be reported as a ConfigurationException.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_VERSION = "0.0.1"
DEFAULT_LOGFIRE_ENDPOINT = "https://logfire-api.pydantic.dev/v1"
LOGFIRE_TRACER_NAME = "logfire"


class LogfireSettings(BaseSettings):
    """Logfire settings loaded from environment and .env.

    Every field has a default; explicit keyword overrides passed to the
    constructor win over the environment.
    """

    # Service
    service_name: str = ""
    service_version: str = SERVICE_VERSION

    # Backend: write token and OTLP base URL (traces go to <endpoint>/traces)
    token: SecretStr | None = None
    endpoint: str = DEFAULT_LOGFIRE_ENDPOINT

    # Batching: max delay before the SDK exports a batch of finished spans.
    batch_timeout_seconds: float = Field(default=1.0, gt=0)

    # Register the provider with opentelemetry.trace.set_tracer_provider.
    register_global: bool = True

    # Print the facade's own diagnostics (logfire_otel.* loggers) to stdout at DEBUG.
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="LOGFIRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    @field_validator("endpoint")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the endpoint so the traces path is joined with a single slash."""
        return value.rstrip("/")

    @property
    def has_token(self) -> bool:
        """True when a non-empty write token is configured."""
        return self.token is not None and bool(self.token.get_secret_value())

    @property
    def traces_endpoint(self) -> str:
        """Full OTLP/HTTP traces URL."""
        return f"{self.endpoint}/traces"

    def auth_headers(self) -> dict[str, str]:
        """Return the Authorization header for the exporter.

        Returns:
            Dict with a Bearer token, or an empty dict when no token is set.
        """
        if not self.has_token:
            return {}
        return {"Authorization": f"Bearer {self.token.get_secret_value()}"}


@lru_cache
def get_settings() -> LogfireSettings:
    """Return cached settings read from the environment (single instance per process).

    In tests, call get_settings.cache_clear() after changing env vars so the
    next get_settings() picks up the new values.

    Returns:
        Loaded and validated LogfireSettings instance.
    """
    return LogfireSettings()
