"""
Auth Client - High-level SDK for the login flow.

Wires config, transport, form and controller for application code.
"""

from typing import Optional
from auth_front.adapters.cookie_probe import cookies_enabled
from auth_front.adapters.httpx_transport import HttpxAuthTransport
from auth_front.config import AuthFrontConfig
from auth_front.domain.form import CredentialForm, IDENTIFIER, SECRET
from auth_front.domain.identity import SessionIdentity
from auth_front.domain.submission import SubmissionState
from auth_front.ports.router_port import RouterPort
from auth_front.ports.transport_port import AuthTransportPort
from auth_front.sdk.controller import SessionController


class AuthClient:
    """
    High-level login client combining a transport and a session controller.

    Example:
        from auth_front import AuthClient, AuthFrontConfig
        from auth_front.adapters import RouteTable

        client = AuthClient.from_config(AuthFrontConfig.from_env(), router=RouteTable())

        # Login
        state = await client.login("alice1", "pw12345")
        if state.identity:
            print(state.identity.username)
        else:
            print(state.message)

        # Logout
        client.logout()
        await client.aclose()
    """

    def __init__(
        self,
        transport: AuthTransportPort,
        router: Optional[RouterPort] = None,
        form: Optional[CredentialForm] = None,
        after_login_path: str = "main",
        logout_path: str = "logout",
        persistent_session: bool = True,
    ):
        """
        Initialize auth client with adapters.

        Args:
            transport: Login transport (required)
            router: Router (optional)
            form: Credential form (optional, default rules)
            after_login_path: Route shown after login
            logout_path: Route shown after logout
            persistent_session: Whether the session cookie survives between requests
        """
        self._transport = transport
        self._persistent_session = persistent_session
        self._controller = SessionController(
            transport=transport,
            form=form,
            router=router,
            after_login_path=after_login_path,
            logout_path=logout_path,
        )

    @classmethod
    def from_config(
        cls,
        config: AuthFrontConfig,
        router: Optional[RouterPort] = None,
        form: Optional[CredentialForm] = None,
    ) -> "AuthClient":
        """
        Build a client talking to the configured backend over httpx.

        Args:
            config: Backend and routing configuration
            router: Router (optional)
            form: Credential form (optional)
        """
        transport = HttpxAuthTransport(
            base_url=config.backend_url,
            login_path=config.login_path,
            timeout=config.timeout,
        )
        return cls(
            transport=transport,
            router=router,
            form=form,
            after_login_path=config.after_login_path,
            logout_path=config.logout_path,
            persistent_session=cookies_enabled(transport.cookies, config.cookies_enabled),
        )

    @property
    def controller(self) -> SessionController:
        return self._controller

    @property
    def persistent_session(self) -> bool:
        """True if the backend session cookie can be kept."""
        return self._persistent_session

    @property
    def identity(self) -> Optional[SessionIdentity]:
        return self._controller.identity

    async def login(self, identifier: str, secret: str) -> SubmissionState:
        """
        Fill the form, submit it and wait for the outcome.

        Args:
            identifier: Username
            secret: Password

        Returns:
            Resulting state. IDLE (with form.submitted_once set) when the
            form is invalid; otherwise SUCCEEDED or FAILED.
        """
        form = self._controller.form
        form.set_value(IDENTIFIER, identifier)
        form.set_value(SECRET, secret)

        task = self._controller.submit()
        if task is not None:
            await task

        return self._controller.state

    def logout(self) -> None:
        """Forget the identity and return to the login view."""
        self._controller.logout()

    async def aclose(self) -> None:
        """Dispose the controller and close the transport."""
        self._controller.dispose()
        await self._transport.aclose()
