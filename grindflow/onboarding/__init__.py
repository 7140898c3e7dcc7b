"""
GrindFlow Onboarding Client

Submits the onboarding questionnaire and checks whether a user has already
completed it.
"""

from .errors import MalformedResponseError, OnboardingClientError, TransportError
from .models import ABSENT, OnboardingData, OnboardingState, OnboardingStatus
from .services import OnboardingClient, create_http_client, create_onboarding_client
from .validation import validate_onboarding_data

__all__ = [
    "ABSENT",
    "MalformedResponseError",
    "OnboardingClient",
    "OnboardingClientError",
    "OnboardingData",
    "OnboardingState",
    "OnboardingStatus",
    "TransportError",
    "create_http_client",
    "create_onboarding_client",
    "validate_onboarding_data",
]
