"""Tests for the GrindFlow onboarding client.

These tests never reach a real backend: HTTP is served by httpx.MockTransport.

Test Categories:
- test_models.py: Data model tests
- test_onboarding_service.py: Submit and status calls, error translation, concurrency
- test_http_client.py: Transport factory tests
- test_validation.py: Local validation tests
- test_config.py: Configuration and logging setup tests
"""
