"""Service modules for backend integrations."""

from .onboarding_service import HttpTransport, OnboardingClient
from .http_client import create_http_client, create_onboarding_client

__all__ = ["HttpTransport", "OnboardingClient", "create_http_client", "create_onboarding_client"]
