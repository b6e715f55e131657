"""
Integration test for the complete login flow.

Tests the recommended wiring:
1. AuthClient - fills the form and drives the SessionController
2. HttpxAuthTransport - talks to the backend (httpx.MockTransport here)
3. RouteTable - moves between login and main views
"""

import json

import httpx
import pytest
from auth_front import AuthClient, AuthFrontConfig
from auth_front.adapters.httpx_transport import HttpxAuthTransport
from auth_front.adapters.route_table import RouteTable, View
from auth_front.domain.identity import SessionIdentity, Role
from auth_front.domain.submission import SubmissionStatus, ErrorCategory


def fake_backend(request):
    """Backend stand-in answering like the real /auth/login endpoint."""
    body = json.loads(request.content)

    if body == {"username": "alice1", "password": "pw12345"}:
        return httpx.Response(
            200,
            json={"id": 1, "username": "alice1", "email": "a@x.com", "roles": [{"name": "USER"}]},
            headers={"Set-Cookie": "jwt=token; Path=/; HttpOnly"},
        )
    if body["username"] == "newbie1":
        return httpx.Response(401, json={"exception": "DisabledException"})
    return httpx.Response(401, json={"exception": "BadCredentialsException"})


@pytest.fixture
def router():
    table = RouteTable()
    table.navigate("")
    return table


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def client(router, requests_seen):
    def handler(request):
        requests_seen.append(request)
        return fake_backend(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    transport = HttpxAuthTransport("http://backend.test", client=http)
    return AuthClient(transport=transport, router=router)


@pytest.mark.asyncio
async def test_scenario_successful_login(client, router):
    """Valid credentials -> SUCCEEDED with the backend identity."""
    state = await client.login("alice1", "pw12345")

    assert state.status == SubmissionStatus.SUCCEEDED
    assert state.identity == SessionIdentity(
        id=1, username="alice1", email="a@x.com", roles=(Role("USER"),)
    )
    assert client.identity == state.identity
    assert router.current == View.MAIN


@pytest.mark.asyncio
async def test_scenario_short_identifier(client, router, requests_seen):
    """Short identifier -> stays IDLE, no request made."""
    state = await client.login("bob", "pw12345")

    assert state.status == SubmissionStatus.IDLE
    assert client.controller.form.submitted_once is True
    assert requests_seen == []
    assert router.current == View.LOGIN


@pytest.mark.asyncio
async def test_scenario_bad_credentials(client, router):
    """Backend BadCredentialsException -> FAILED(INVALID_CREDENTIALS)."""
    state = await client.login("alice1", "wrong-pw")

    assert state.status == SubmissionStatus.FAILED
    assert state.error == ErrorCategory.INVALID_CREDENTIALS
    assert router.current == View.LOGIN


@pytest.mark.asyncio
async def test_not_activated_then_logout(client, router):
    """Inactive account, then a successful login and logout."""
    state = await client.login("newbie1", "pw12345")
    assert state.error == ErrorCategory.ACCOUNT_NOT_ACTIVATED

    state = await client.login("alice1", "pw12345")
    assert state.status == SubmissionStatus.SUCCEEDED

    client.logout()
    assert client.identity is None
    assert router.current == View.LOGIN
    assert router.history == [View.LOGIN, View.MAIN, View.LOGIN]


@pytest.mark.asyncio
async def test_from_config_unreachable_backend():
    """Test config-built client maps connection failures to UNCLASSIFIED."""
    config = AuthFrontConfig(backend_url="http://127.0.0.1:9", timeout=0.5, cookies_enabled=False)
    client = AuthClient.from_config(config)

    assert client.persistent_session is True

    state = await client.login("alice1", "pw12345")

    assert state.status == SubmissionStatus.FAILED
    assert state.error == ErrorCategory.UNCLASSIFIED
    assert state.message == "Error (contact the administrator)."

    await client.aclose()
    assert client.controller.disposed
