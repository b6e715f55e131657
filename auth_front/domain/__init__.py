"""
Domain Models - Pure login entities.

No infrastructure dependencies. Domain logic only.
"""

from auth_front.domain.credential import Credentials
from auth_front.domain.identity import SessionIdentity, Role
from auth_front.domain.form import CredentialForm, FieldRule, FieldState, ViolationKind, DEFAULT_RULES
from auth_front.domain.outcome import AuthSuccess, AuthFailure, AuthOutcome, TransportError
from auth_front.domain.submission import (
    SubmissionState,
    SubmissionStatus,
    ErrorCategory,
    ERROR_MESSAGES,
    classify_error,
)

__all__ = [
    "Credentials",
    "SessionIdentity",
    "Role",
    "CredentialForm",
    "FieldRule",
    "FieldState",
    "ViolationKind",
    "DEFAULT_RULES",
    "AuthSuccess",
    "AuthFailure",
    "AuthOutcome",
    "TransportError",
    "SubmissionState",
    "SubmissionStatus",
    "ErrorCategory",
    "ERROR_MESSAGES",
    "classify_error",
]
