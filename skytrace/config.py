"""
Configuration management for skytrace.

Loads settings from environment variables with sensible defaults.
A local .env file is honoured so credentials never need to live in code.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _parse_float(value: str, default: float) -> float:
    """Parse a float setting, falling back to default if empty/invalid."""
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class OpenSkyConfig:
    """OpenSky API configuration."""
    username: Optional[str] = os.getenv('OPENSKY_USERNAME') or None
    password: Optional[str] = os.getenv('OPENSKY_PASSWORD') or None
    base_url: str = os.getenv('OPENSKY_BASE_URL') or 'https://opensky-network.org/api'

    # Historical queries can be slow server-side, hence the generous default
    timeout_seconds: float = _parse_float(os.getenv('OPENSKY_TIMEOUT_SECONDS', ''), 300.0)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.username and self.password)


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    opensky: OpenSkyConfig
    debug: bool


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        opensky=OpenSkyConfig(),
        debug=os.getenv('SKYTRACE_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
