"""
Integration tests against a running backend.

Tests the full stack: form -> controller -> httpx -> /auth/login.
Requires the backend running on AUTH_FRONT_BACKEND_URL with a seeded
activated user (AUTH_FRONT_TEST_USER / AUTH_FRONT_TEST_PASSWORD).
"""

import os

import pytest
from auth_front import AuthClient, AuthFrontConfig
from auth_front.domain.submission import SubmissionStatus, ErrorCategory


@pytest.fixture
def config():
    """Backend config from the environment."""
    return AuthFrontConfig.from_env()


@pytest.fixture
def test_user():
    """Seeded user credentials."""
    return (
        os.environ.get("AUTH_FRONT_TEST_USER", "testuser"),
        os.environ.get("AUTH_FRONT_TEST_PASSWORD", "testpassword"),
    )


@pytest.mark.skip(reason="Requires backend running with a seeded user")
class TestAPIIntegration:
    """Test login against the running backend."""

    @pytest.mark.asyncio
    async def test_login_with_valid_credentials(self, config, test_user):
        """Test seeded user can log in and gets a session cookie."""
        client = AuthClient.from_config(config)

        state = await client.login(*test_user)

        assert state.status == SubmissionStatus.SUCCEEDED
        assert state.identity.username == test_user[0]
        assert state.identity.roles
        await client.aclose()

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, config, test_user):
        """Test backend reports BadCredentialsException."""
        client = AuthClient.from_config(config)

        state = await client.login(test_user[0], "definitely-wrong")

        assert state.error == ErrorCategory.INVALID_CREDENTIALS
        await client.aclose()
