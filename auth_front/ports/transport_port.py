"""
Auth Transport Port - Interface for submitting credentials to the backend.

Implementations:
- HttpxAuthTransport: POST {backend}/auth/login over httpx
- MemoryAuthTransport: In-memory backend (testing only)
"""

from abc import ABC, abstractmethod
from auth_front.domain.credential import Credentials
from auth_front.domain.outcome import AuthOutcome


class AuthTransportPort(ABC):
    """Port: Perform one login exchange and normalize its result."""

    @abstractmethod
    async def authenticate(self, credentials: Credentials) -> AuthOutcome:
        """
        Submit credentials as the whole request payload.

        No retries, no caching: every call is a fresh exchange.

        Args:
            credentials: Validated credentials

        Returns:
            AuthSuccess with the session identity, or AuthFailure
            carrying the backend exception tag and HTTP status
        """
        pass

    async def aclose(self) -> None:
        """Release transport resources (no-op by default)."""
        return None
