"""
Submission Domain Model - Login attempt lifecycle and error categories.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from auth_front.domain.identity import SessionIdentity


class SubmissionStatus(Enum):
    """Login attempt lifecycle states."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ErrorCategory(Enum):
    """User-facing classes of a failed login."""
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_NOT_ACTIVATED = "account_not_activated"
    UNCLASSIFIED = "unclassified"


# Ordered: first match wins, anything else is UNCLASSIFIED.
_TAG_CATEGORIES = (
    ("BadCredentialsException", ErrorCategory.INVALID_CREDENTIALS),
    ("DisabledException", ErrorCategory.ACCOUNT_NOT_ACTIVATED),
)

ERROR_MESSAGES: Dict[ErrorCategory, str] = {
    ErrorCategory.INVALID_CREDENTIALS: "Error: check your username or password.",
    ErrorCategory.ACCOUNT_NOT_ACTIVATED: "User is not activated.",
    ErrorCategory.UNCLASSIFIED: "Error (contact the administrator).",
}


def classify_error(exception_tag: Optional[str]) -> ErrorCategory:
    """
    Map a backend exception tag to an error category.

    Args:
        exception_tag: Backend "exception" field, None if unavailable

    Returns:
        Exactly one category; unknown and missing tags are UNCLASSIFIED
    """
    for tag, category in _TAG_CATEGORIES:
        if exception_tag == tag:
            return category
    return ErrorCategory.UNCLASSIFIED


@dataclass(frozen=True)
class SubmissionState:
    """
    Immutable snapshot of the submission state machine.

    identity is set only when SUCCEEDED, error only when FAILED.
    """
    status: SubmissionStatus
    identity: Optional[SessionIdentity] = None
    error: Optional[ErrorCategory] = None

    @classmethod
    def idle(cls) -> "SubmissionState":
        return cls(SubmissionStatus.IDLE)

    @classmethod
    def loading(cls) -> "SubmissionState":
        return cls(SubmissionStatus.LOADING)

    @classmethod
    def succeeded(cls, identity: SessionIdentity) -> "SubmissionState":
        return cls(SubmissionStatus.SUCCEEDED, identity=identity)

    @classmethod
    def failed(cls, error: ErrorCategory) -> "SubmissionState":
        return cls(SubmissionStatus.FAILED, error=error)

    @property
    def is_loading(self) -> bool:
        return self.status == SubmissionStatus.LOADING

    @property
    def message(self) -> Optional[str]:
        """Fixed human-readable message for a FAILED state."""
        if self.error is None:
            return None
        return ERROR_MESSAGES[self.error]
