"""FXPulse — application configuration.

Loads .env variables into a typed config object.
Validates enumerated settings on startup.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


RULE_PROFILES = ("dashboard", "edge")
DATA_SOURCES = ("synthetic", "live")


@dataclass(frozen=True)
class Config:
    """Typed configuration loaded from environment variables."""

    rule_profile: str  # "dashboard" (canonical) or "edge" (legacy constants)
    data_source: str  # "synthetic" or "live"
    quote_api_base_url: str
    quote_timeout_seconds: float
    cors_allow_origin: str
    log_level: str
    http_port: int
    random_seed: Optional[int] = None

    @property
    def uses_live_quotes(self) -> bool:
        """Return ``True`` when the dashboard should analyse live quotes."""
        return self.data_source == "live"


def default_config() -> Config:
    """Return a config populated with defaults only (no environment)."""
    return Config(
        rule_profile="dashboard",
        data_source="synthetic",
        quote_api_base_url="https://query1.finance.yahoo.com",
        quote_timeout_seconds=10.0,
        cors_allow_origin="*",
        log_level="INFO",
        http_port=8080,
    )


def load_config(env_path: str | None = None) -> Config:
    """Load configuration from environment variables.

    Raises ``ValueError`` with a message naming the offending variable when
    an enumerated setting holds an unknown value.
    """
    load_dotenv(dotenv_path=env_path)

    rule_profile = os.environ.get("RULE_PROFILE", "dashboard").lower()
    if rule_profile not in RULE_PROFILES:
        raise ValueError(
            f"Invalid RULE_PROFILE '{rule_profile}'. "
            f"Expected one of: {', '.join(RULE_PROFILES)}"
        )

    data_source = os.environ.get("DATA_SOURCE", "synthetic").lower()
    if data_source not in DATA_SOURCES:
        raise ValueError(
            f"Invalid DATA_SOURCE '{data_source}'. "
            f"Expected one of: {', '.join(DATA_SOURCES)}"
        )

    seed = os.environ.get("RANDOM_SEED")

    return Config(
        rule_profile=rule_profile,
        data_source=data_source,
        quote_api_base_url=os.environ.get(
            "QUOTE_API_BASE_URL", "https://query1.finance.yahoo.com"
        ).rstrip("/"),
        quote_timeout_seconds=float(os.environ.get("QUOTE_TIMEOUT_SECONDS", "10.0")),
        cors_allow_origin=os.environ.get("CORS_ALLOW_ORIGIN", "*"),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        http_port=int(os.environ.get("HTTP_PORT", "8080")),
        random_seed=int(seed) if seed else None,
    )
