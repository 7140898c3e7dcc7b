"""Data models for onboarding."""

from .onboarding_data import ABSENT, OnboardingData, OnboardingState, OnboardingStatus

__all__ = ["ABSENT", "OnboardingData", "OnboardingState", "OnboardingStatus"]
