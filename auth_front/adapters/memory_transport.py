"""
Memory Auth Transport - In-memory login backend (testing only).
"""

import asyncio
from dataclasses import dataclass
from typing import Dict, List, Optional

from auth_front.domain.credential import Credentials
from auth_front.domain.identity import SessionIdentity
from auth_front.domain.outcome import AuthOutcome, AuthSuccess, AuthFailure, TransportError
from auth_front.ports.transport_port import AuthTransportPort


@dataclass
class _Account:
    identity: SessionIdentity
    password: str
    active: bool


class MemoryAuthTransport(AuthTransportPort):
    """
    In-memory login backend.

    Answers like the real backend: 401 + BadCredentialsException for a
    wrong username/password, 401 + DisabledException for an account that
    is not activated yet.

    WARNING: Only for testing. Passwords are kept in plain text.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self._accounts: Dict[str, _Account] = {}
        self._gate: Optional[asyncio.Event] = None
        self._forced: Optional[AuthOutcome] = None
        # Identifiers of every call, in order (secrets are not recorded)
        self.calls: List[str] = []

    def register(self, identity: SessionIdentity, password: str, active: bool = True) -> None:
        """Add or replace an account."""
        self._accounts[identity.username] = _Account(identity, password, active)

    def respond_with(self, outcome: Optional[AuthOutcome]) -> None:
        """Answer every following call with a fixed outcome (None to stop)."""
        self._forced = outcome

    def pause(self) -> None:
        """Keep subsequent calls pending until resume()."""
        self._gate = asyncio.Event()

    def resume(self) -> None:
        """Release pending calls."""
        if self._gate is not None:
            self._gate.set()
            self._gate = None

    async def authenticate(self, credentials: Credentials) -> AuthOutcome:
        """Check credentials against registered accounts."""
        self.calls.append(credentials.identifier)

        gate = self._gate
        if gate is not None:
            await gate.wait()

        if self._forced is not None:
            return self._forced

        account = self._accounts.get(credentials.identifier)
        if account is None or account.password != credentials.secret:
            return AuthFailure(TransportError(exception_tag="BadCredentialsException", status=401))

        if not account.active:
            return AuthFailure(TransportError(exception_tag="DisabledException", status=401))

        return AuthSuccess(account.identity)
