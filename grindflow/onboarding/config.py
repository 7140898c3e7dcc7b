"""
Configuration management for the GrindFlow onboarding client.

Loads settings from environment variables or a .env file.
Never commit API tokens to the repository.
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Look for .env in the package directory or repo root
_ENV_PATHS = [
    Path(__file__).parent / ".env",
    Path(__file__).parent.parent.parent / ".env",
]
for _env_path in _ENV_PATHS:
    if _env_path.exists():
        load_dotenv(_env_path)
        break

DEFAULT_API_URL = "http://localhost:5002"
DEFAULT_TIMEOUT = 10.0


def normalize_api_base(raw: str) -> str:
    """
    Normalize a backend address so it ends with exactly one ``/api``.

    Args:
        raw: Address as configured, with or without a trailing ``/api``

    Returns:
        Base URL ending in ``/api``
    """
    url = raw.strip().rstrip("/")
    url = re.sub(r"/api$", "", url, flags=re.IGNORECASE)
    return f"{url}/api"


@dataclass
class ApiConfig:
    """Backend API configuration."""
    base_url: str  # Ends with /api
    token: Optional[str] = None  # Bearer token for the authenticated session
    timeout: float = DEFAULT_TIMEOUT  # Seconds

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Load API configuration from environment variables."""
        raw_timeout = os.environ.get("GRINDFLOW_API_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"GRINDFLOW_API_TIMEOUT must be a number, got {raw_timeout!r}")
            if timeout <= 0:
                raise ValueError("GRINDFLOW_API_TIMEOUT must be positive")

        return cls(
            base_url=normalize_api_base(os.environ.get("GRINDFLOW_API_URL") or DEFAULT_API_URL),
            token=os.environ.get("GRINDFLOW_API_TOKEN") or None,
            timeout=timeout,
        )


@dataclass
class Config:
    """Main configuration container."""
    api: ApiConfig = field(default_factory=lambda: ApiConfig(base_url=normalize_api_base(DEFAULT_API_URL)))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load all configuration from environment variables."""
        return cls(
            api=ApiConfig.from_env(),
            log_level=os.environ.get("GRINDFLOW_LOG_LEVEL", "INFO").upper(),
        )


def get_config() -> Config:
    """Get the current configuration."""
    return Config.from_env()
