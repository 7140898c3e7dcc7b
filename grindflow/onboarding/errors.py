"""
Errors raised by the onboarding client.

Both failure kinds reach the caller unchanged. A caller can always tell a
failed request apart from a valid "not completed" status.
"""

from typing import Any, Optional


class OnboardingClientError(Exception):
    """Base class for onboarding client failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(OnboardingClientError):
    """The request could not be completed (network failure or non-success status)."""

    def __init__(
        self,
        message: str,
        method: str,
        url: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code  # None when no response was received

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.method} {self.url} failed with status {self.status_code}: {self.message}"
        return f"{self.method} {self.url} failed: {self.message}"


class MalformedResponseError(OnboardingClientError):
    """A response arrived but did not have the expected shape."""

    def __init__(self, message: str, body: Any = None):
        super().__init__(message)
        self.body = body
