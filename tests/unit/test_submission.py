"""
Unit tests for error classification and submission state.
"""

import pytest
from auth_front.domain.identity import SessionIdentity
from auth_front.domain.submission import (
    ErrorCategory,
    SubmissionState,
    SubmissionStatus,
    ERROR_MESSAGES,
    classify_error,
)


@pytest.mark.parametrize("tag,expected", [
    ("BadCredentialsException", ErrorCategory.INVALID_CREDENTIALS),
    ("DisabledException", ErrorCategory.ACCOUNT_NOT_ACTIVATED),
    ("SomethingElse", ErrorCategory.UNCLASSIFIED),
    (None, ErrorCategory.UNCLASSIFIED),
    ("", ErrorCategory.UNCLASSIFIED),
    ("badcredentialsexception", ErrorCategory.UNCLASSIFIED),
])
def test_classify_error(tag, expected):
    """Test every tag maps to exactly one category."""
    assert classify_error(tag) == expected


def test_every_category_has_a_message():
    """Test presentation messages cover all categories."""
    assert set(ERROR_MESSAGES) == set(ErrorCategory)


def test_failed_state_message():
    """Test failed state exposes its fixed message."""
    state = SubmissionState.failed(ErrorCategory.ACCOUNT_NOT_ACTIVATED)

    assert state.status == SubmissionStatus.FAILED
    assert state.identity is None
    assert state.message == "User is not activated."


def test_succeeded_state():
    """Test succeeded state carries the identity only."""
    identity = SessionIdentity(id=1, username="alice1")
    state = SubmissionState.succeeded(identity)

    assert state.identity == identity
    assert state.error is None
    assert state.message is None
    assert not state.is_loading


def test_loading_state():
    """Test loading state."""
    assert SubmissionState.loading().is_loading
    assert SubmissionState.idle().status == SubmissionStatus.IDLE
