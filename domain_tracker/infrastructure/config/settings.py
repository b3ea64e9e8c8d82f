"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

from ...domain.value_objects import ExpirationThresholds
from ..adapters.cloudflare import CloudflareConfig
from ..adapters.whois import WhoisProxyConfig

STORE_BACKENDS = ("memory", "file", "redis")
RUN_MODES = ("api", "once", "scheduled")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Access secrets
    access_password: str = field(default_factory=lambda: _env_str("ACCESS_PASSWORD"), repr=False)
    admin_password: str = field(default_factory=lambda: _env_str("ADMIN_PASSWORD"), repr=False)

    # External services
    whois_proxy_url: str = field(default_factory=lambda: _env_str("WHOIS_PROXY_URL"))
    cf_api_token: str = field(default_factory=lambda: _env_str("CF_API_TOKEN"), repr=False)
    cf_api_base_url: str = field(
        default_factory=lambda: _env_str("CF_API_BASE_URL", "https://api.cloudflare.com/client/v4")
    )
    http_timeout_seconds: float = field(default_factory=lambda: _env_float("HTTP_TIMEOUT_SECONDS", 10.0))

    # Classification tags
    dns_provider_tag: str = field(default_factory=lambda: _env_str("DNS_PROVIDER_TAG", "Cloudflare"))
    custom_system_tag: str = field(default_factory=lambda: _env_str("CUSTOM_SYSTEM_TAG", "custom"))

    # Record store
    store_backend: str = field(default_factory=lambda: _env_str("STORE_BACKEND", "file"))
    store_path: str = field(default_factory=lambda: _env_str("STORE_PATH", "./data/domains"))
    redis_url: str = field(default_factory=lambda: _env_str("REDIS_URL", "redis://localhost:6379/0"))
    redis_key: str = field(default_factory=lambda: _env_str("REDIS_KEY", "domain_tracker:records"))

    # Thresholds
    critical_threshold_days: int = field(default_factory=lambda: _env_int("CRITICAL_THRESHOLD_DAYS", 7))
    warning_threshold_days: int = field(default_factory=lambda: _env_int("WARNING_THRESHOLD_DAYS", 30))

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "api"))
    cron_schedule: str = field(default_factory=lambda: _env_str("CRON_SCHEDULE", "0 6 * * *"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # API settings
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))
    app_title: str = field(default_factory=lambda: _env_str("APP_TITLE", "Domain Tracker"))

    def validate(self) -> None:
        """Validate required settings."""
        if not self.admin_password:
            msg = "Missing required environment variables: ADMIN_PASSWORD"
            raise ValueError(msg)

        if self.store_backend.lower() not in STORE_BACKENDS:
            msg = f"Invalid STORE_BACKEND: {self.store_backend} (use one of {', '.join(STORE_BACKENDS)})"
            raise ValueError(msg)

        if self.run_mode.lower() not in RUN_MODES:
            msg = f"Invalid RUN_MODE: {self.run_mode} (use one of {', '.join(RUN_MODES)})"
            raise ValueError(msg)

        # Raises ValueError on bad ordering
        _ = self.thresholds

    @cached_property
    def thresholds(self) -> ExpirationThresholds:
        """Get expiration thresholds."""
        return ExpirationThresholds(
            critical=self.critical_threshold_days,
            warning=self.warning_threshold_days,
        )

    @cached_property
    def whois_config(self) -> WhoisProxyConfig:
        """Get WHOIS proxy configuration."""
        return WhoisProxyConfig(
            base_url=self.whois_proxy_url,
            timeout=self.http_timeout_seconds,
        )

    @cached_property
    def cloudflare_config(self) -> CloudflareConfig:
        """Get Cloudflare API configuration."""
        return CloudflareConfig(
            api_token=self.cf_api_token,
            base_url=self.cf_api_base_url,
            provider_tag=self.dns_provider_tag,
            timeout=self.http_timeout_seconds,
        )

    @cached_property
    def store_directory(self) -> Path:
        """Directory of the file record store."""
        return Path(self.store_path)


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
