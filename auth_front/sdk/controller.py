"""
Session Controller - Drives one login form through the submission lifecycle.

    IDLE ----submit() [valid]----> LOADING
    LOADING --AuthSuccess-------> SUCCEEDED(identity)
    LOADING --AuthFailure-------> FAILED(category)
    LOADING --task cancelled----> FAILED(UNCLASSIFIED)
    SUCCEEDED / FAILED --submit() [valid]--> LOADING

An invalid submit only sets form.submitted_once. While LOADING, submit()
is ignored, so at most one transport call is in flight per controller.
"""

import asyncio
import functools
import logging
from typing import Callable, List, Optional

from auth_front.domain.credential import Credentials
from auth_front.domain.form import CredentialForm
from auth_front.domain.identity import SessionIdentity
from auth_front.domain.outcome import AuthOutcome, AuthFailure, TransportError
from auth_front.domain.submission import (
    SubmissionState,
    SubmissionStatus,
    ErrorCategory,
    classify_error,
)
from auth_front.ports.router_port import RouterPort
from auth_front.ports.transport_port import AuthTransportPort


logger = logging.getLogger(__name__)

StateListener = Callable[[SubmissionState], None]


class SessionController:
    """
    Owns the authoritative SubmissionState for one login view.

    Single-threaded: all state changes happen on the asyncio loop that
    called submit(). Views bind to the properties and/or subscribe().

    Example:
        controller = SessionController(transport=HttpxAuthTransport(url))
        controller.form.set_value("identifier", "alice1")
        controller.form.set_value("secret", "pw12345")
        task = controller.submit()
        if task:
            await task
        controller.state.status  # SUCCEEDED or FAILED
    """

    def __init__(
        self,
        transport: AuthTransportPort,
        form: Optional[CredentialForm] = None,
        router: Optional[RouterPort] = None,
        after_login_path: str = "main",
        logout_path: str = "logout",
    ):
        """
        Initialize controller.

        Args:
            transport: Login transport (required)
            form: Credential form (default: DEFAULT_RULES form)
            router: Router told to leave the login view on success (optional)
            after_login_path: Route navigated to after a successful login
            logout_path: Route navigated to on logout
        """
        self._transport = transport
        self._form = form or CredentialForm()
        self._router = router
        self._after_login_path = after_login_path
        self._logout_path = logout_path

        self._state = SubmissionState.idle()
        self._in_flight: Optional["asyncio.Task[None]"] = None
        self._listeners: List[StateListener] = []
        self._disposed = False
        self._attempt = 0

    # View bindings

    @property
    def form(self) -> CredentialForm:
        return self._form

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def identity(self) -> Optional[SessionIdentity]:
        """Authenticated identity (only while SUCCEEDED)."""
        return self._state.identity

    @property
    def error(self) -> Optional[ErrorCategory]:
        return self._state.error

    @property
    def error_message(self) -> Optional[str]:
        return self._state.message

    @property
    def disposed(self) -> bool:
        return self._disposed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Receive every new SubmissionState.

        Args:
            listener: Called with the new state after each transition

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Lifecycle

    def submit(self) -> Optional["asyncio.Task[None]"]:
        """
        Try to submit the form.

        Returns immediately. The transport result is applied later on the
        running event loop.

        Returns:
            Task resolving once the state left LOADING, or None if the
            submit was gated (invalid form, already loading, disposed)

        Raises:
            RuntimeError: If called with a valid form outside a running loop
        """
        self._form.mark_submitted()

        if self._disposed:
            logger.debug("Submit ignored: controller disposed")
            return None

        if not self._form.is_valid():
            logger.debug("Submit gated: form invalid")
            return None

        if self._in_flight is not None or self._state.status == SubmissionStatus.LOADING:
            logger.debug("Submit ignored: login already in flight")
            return None

        loop = asyncio.get_running_loop()
        credentials = self._form.snapshot()

        self._attempt += 1
        self._set_state(SubmissionState.loading())
        task = loop.create_task(self._exchange(credentials, self._attempt))
        task.add_done_callback(functools.partial(self._on_cancelled, self._attempt))
        self._in_flight = task
        return task

    def logout(self) -> None:
        """
        Drop the identity, clear the form and go back to the login view.

        A login still in flight is not cancelled; its result is dropped.
        """
        self._attempt += 1
        if self._state.identity is not None:
            logger.info("Logged out %s", self._state.identity.username)

        self._form.reset()
        self._set_state(SubmissionState.idle())

        if self._router is not None:
            self._router.navigate(self._logout_path)

    def dispose(self) -> None:
        """
        Tear down: detach listeners and ignore any pending resolution.

        The in-flight request is not cancelled, its result is just dropped.
        """
        self._disposed = True
        self._listeners.clear()

    async def _exchange(self, credentials: Credentials, attempt: int) -> None:
        try:
            outcome = await self._transport.authenticate(credentials)
        except Exception:
            logger.exception("Login transport raised instead of returning an outcome")
            outcome = AuthFailure(TransportError(detail="transport raised"))
        finally:
            self._in_flight = None

        if self._disposed or attempt != self._attempt:
            logger.debug("Login resolved after dispose or logout; result dropped")
            return

        self._apply(outcome)

    def _on_cancelled(self, attempt: int, task: "asyncio.Task[None]") -> None:
        # Also covers a task cancelled before it first ran
        if not task.cancelled():
            return
        if self._in_flight is task:
            self._in_flight = None
        if self._disposed or attempt != self._attempt:
            return

        logger.warning("Login cancelled while in flight")
        self._set_state(SubmissionState.failed(ErrorCategory.UNCLASSIFIED))

    def _apply(self, outcome: AuthOutcome) -> None:
        if isinstance(outcome, AuthFailure):
            category = classify_error(outcome.error.exception_tag)
            logger.warning(
                "Login failed: %s (tag=%s, status=%s)",
                category.value,
                outcome.error.exception_tag,
                outcome.error.status,
            )
            self._set_state(SubmissionState.failed(category))
            return

        # The secret was needed for exactly one transmission
        self._form.discard_secret()
        logger.info("Logged in as %s", outcome.identity.username)
        self._set_state(SubmissionState.succeeded(outcome.identity))

        if self._router is not None:
            self._router.navigate(self._after_login_path)

    def _set_state(self, state: SubmissionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
