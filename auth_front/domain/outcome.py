"""
Transport Outcome - Normalized result of one login exchange.
"""

from dataclasses import dataclass
from typing import Optional, Union

from auth_front.domain.identity import SessionIdentity


@dataclass(frozen=True)
class TransportError:
    """
    Failure descriptor for a login exchange.

    exception_tag is the backend's "exception" field (e.g.
    "BadCredentialsException"). It is None when no response arrived
    or the body could not be read.
    """
    exception_tag: Optional[str] = None
    status: Optional[int] = None
    detail: Optional[str] = None


@dataclass(frozen=True)
class AuthSuccess:
    """Backend accepted the credentials."""
    identity: SessionIdentity
    ok = True


@dataclass(frozen=True)
class AuthFailure:
    """Backend rejected the credentials, or the exchange itself failed."""
    error: TransportError
    ok = False


AuthOutcome = Union[AuthSuccess, AuthFailure]
