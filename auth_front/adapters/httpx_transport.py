"""
Httpx Auth Transport - Implements AuthTransportPort over HTTP.
"""

import logging
from typing import Optional

import httpx

from auth_front.domain.credential import Credentials
from auth_front.domain.identity import SessionIdentity
from auth_front.domain.outcome import AuthOutcome, AuthSuccess, AuthFailure, TransportError
from auth_front.ports.transport_port import AuthTransportPort


logger = logging.getLogger(__name__)


class HttpxAuthTransport(AuthTransportPort):
    """
    Login transport backed by httpx.AsyncClient.

    Sends POST {base_url}{login_path} with the credentials as JSON body.
    A 2xx body is parsed straight into SessionIdentity. Any other status
    is read as the backend's JSON error body ({"exception": "..."}).
    Timeouts belong to the httpx client; nothing is retried here.
    """

    def __init__(
        self,
        base_url: str,
        login_path: str = "/auth/login",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize transport.

        Args:
            base_url: Backend root, e.g. http://localhost:8080
            login_path: Login endpoint path
            timeout: Request timeout in seconds (ignored when client is given)
            client: Pre-built client (tests inject httpx.MockTransport here)
        """
        self._url = base_url.rstrip("/") + "/" + login_path.lstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def url(self) -> str:
        """Full login endpoint URL."""
        return self._url

    @property
    def cookies(self) -> httpx.Cookies:
        """Cookie jar shared with the backend (holds the session cookie)."""
        return self._client.cookies

    async def authenticate(self, credentials: Credentials) -> AuthOutcome:
        """Submit credentials and normalize the response."""
        try:
            response = await self._client.post(self._url, json=credentials.to_payload())
        except httpx.HTTPError as e:
            logger.warning("Login request to %s failed: %s", self._url, e)
            return AuthFailure(TransportError(detail=str(e)))

        if response.is_success:
            try:
                identity = SessionIdentity.from_dict(response.json())
            except (ValueError, KeyError, TypeError) as e:
                logger.warning("Malformed login response (status %s): %s", response.status_code, e)
                return AuthFailure(
                    TransportError(status=response.status_code, detail="malformed response body")
                )
            return AuthSuccess(identity)

        return AuthFailure(
            TransportError(
                exception_tag=_exception_tag(response),
                status=response.status_code,
            )
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()


def _exception_tag(response: httpx.Response) -> Optional[str]:
    """Read the "exception" field of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    tag = body.get("exception")
    return tag if isinstance(tag, str) else None
