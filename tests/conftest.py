"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from liveness_relay.app import app
from liveness_relay.config import Settings

TARGET_CHANNEL = "C0BETBY001"


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def settings() -> Settings:
    """Settings with test credentials, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        slack_bot_token="xoxb-test",
        slack_signing_secret="test_signing_secret_1234",
        target_channel_id=TARGET_CHANNEL,
        sumsub_app_token="sbx:app-token",
        sumsub_secret_key="sumsub-secret",
        intercom_token="intercom-token",
        intercom_admin_id="4242",
    )
