"""
Onboarding service for the GrindFlow backend.

Handles:
- Submitting the onboarding questionnaire
- Fetching whether onboarding is complete, with the stored answers

Each call issues exactly one request over the injected transport. Nothing is
retried, cached or substituted: failures surface as TransportError or
MalformedResponseError.
"""

import logging
from typing import Any, Protocol

import httpx

from ..errors import MalformedResponseError, TransportError
from ..models.onboarding_data import OnboardingData, OnboardingStatus

logger = logging.getLogger(__name__)


class HttpTransport(Protocol):
    """Anything that can issue async GET/POST requests, e.g. httpx.AsyncClient."""

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        ...

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        ...


class OnboardingClient:
    """Client for the onboarding completion and status endpoints."""

    COMPLETE_PATH = "/onboarding/complete"
    STATUS_PATH = "/onboarding/status"

    def __init__(self, http: HttpTransport):
        """
        Initialize the onboarding client.

        Args:
            http: Pre-configured transport (base URL and auth already applied).
                The client never closes it.
        """
        self.http = http

    async def submit(self, data: OnboardingData) -> Any:
        """
        Submit onboarding answers.

        The answers are sent as-is; required fields are not checked here.
        Calling this twice sends two writes.

        Args:
            data: The user's answers

        Returns:
            The backend's decoded response payload, or None for an empty body

        Raises:
            TransportError: If the request failed or returned a non-success status
            MalformedResponseError: If the response body is not valid JSON
        """
        response = await self._send("POST", self.COMPLETE_PATH, json=data.to_dict())
        payload = self._decode(response, self.COMPLETE_PATH)
        logger.info("Submitted onboarding answers")
        return payload

    async def fetch_status(self) -> OnboardingStatus:
        """
        Fetch the current onboarding status.

        Returns:
            OnboardingStatus for the authenticated user

        Raises:
            TransportError: If the request failed or returned a non-success status
            MalformedResponseError: If the body is not a valid status object
        """
        response = await self._send("GET", self.STATUS_PATH)
        body = self._decode(response, self.STATUS_PATH)

        try:
            status = OnboardingStatus.from_dict(body)
        except ValueError as e:
            logger.error(f"Unexpected onboarding status response: {e}")
            raise MalformedResponseError(f"Unexpected onboarding status response: {e}", body=body) from e

        logger.info(f"Fetched onboarding status: {status.state.value}")
        return status

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        request = self.http.post if method == "POST" else self.http.get
        try:
            response = await request(path, **kwargs)
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"{method} {path} returned status {status_code}")
            raise TransportError(str(e), method, path, status_code) from e
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__, method, path) from e

        if not response.is_success:
            logger.error(f"{method} {path} returned status {response.status_code}")
            raise TransportError(
                response.reason_phrase or "request failed",
                method,
                path,
                response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response, path: str) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Response from {path} is not valid JSON")
            raise MalformedResponseError(
                f"Response from {path} is not valid JSON", body=response.text
            ) from e
