"""
HTTP transport setup for the GrindFlow backend.

The onboarding client only consumes a transport; building and closing it is
the application's job. These helpers build one from configuration.
"""

import logging
from typing import Optional

import httpx

from ..config import ApiConfig, Config, get_config
from .onboarding_service import HttpTransport, OnboardingClient

logger = logging.getLogger(__name__)


def create_http_client(api_config: ApiConfig) -> httpx.AsyncClient:
    """
    Create an AsyncClient pointed at the backend API.

    Args:
        api_config: Base URL, optional bearer token and timeout

    Returns:
        httpx.AsyncClient; the caller is responsible for closing it
    """
    headers = {"Accept": "application/json"}
    if api_config.token:
        headers["Authorization"] = f"Bearer {api_config.token}"

    logger.debug(f"Creating HTTP client for {api_config.base_url}")
    return httpx.AsyncClient(
        base_url=api_config.base_url,
        headers=headers,
        timeout=api_config.timeout,
    )


def create_onboarding_client(
    http: Optional[HttpTransport] = None,
    config: Optional[Config] = None,
) -> OnboardingClient:
    """
    Create an OnboardingClient.

    Args:
        http: Transport to use; built from config when omitted
        config: Configuration; loaded from the environment when omitted

    Returns:
        OnboardingClient wrapping the transport
    """
    if http is None:
        config = config or get_config()
        http = create_http_client(config.api)
    return OnboardingClient(http)
