"""
Local validation for onboarding submissions.

Optional: OnboardingClient.submit never calls this, the backend remains the
authority. Values are only inspected, never modified or dropped.
"""

import re
from typing import List, Tuple

from .models.onboarding_data import OnboardingData

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_valid_email(value: str) -> bool:
    """Check whether a string looks like an email address."""
    return isinstance(value, str) and bool(EMAIL_PATTERN.match(value))


def validate_onboarding_data(data: OnboardingData) -> Tuple[bool, List[str]]:
    """
    Validate onboarding answers before submitting them.

    Args:
        data: The answers to check

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []

    # Required answers
    required_fields = {
        "primary_goal": "Primary goal",
        "biggest_challenge": "Biggest challenge",
        "work_style": "Work style",
        "focus_area": "Focus area",
    }

    for attr, label in required_fields.items():
        value = getattr(data, attr)
        if not isinstance(value, str) or not value.strip():
            errors.append(f"{label} is required")

    # Buddy email only matters once the user opted in
    if data.wants_buddy_enabled:
        if not data.buddy_email:
            errors.append("Buddy email is required when inviting a buddy")
        elif not is_valid_email(data.buddy_email):
            errors.append("Please enter a valid buddy email address")

    return len(errors) == 0, errors
