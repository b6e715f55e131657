"""
Auth Front - Client-side login flow.

Hexagonal architecture: the login form, its submission state machine and
the mapping of backend errors to user-facing categories, with the HTTP
transport and routing behind ports.

Usage:
    from auth_front import SessionController
    from auth_front.adapters import HttpxAuthTransport, RouteTable

    controller = SessionController(
        transport=HttpxAuthTransport("http://localhost:8080"),
        router=RouteTable(),
    )

    # Fill the form
    controller.form.set_value("identifier", "alice1")
    controller.form.set_value("secret", "pw12345")

    # Submit (inside a running event loop)
    task = controller.submit()
"""

__version__ = "0.1.0"

from auth_front.sdk.client import AuthClient
from auth_front.sdk.controller import SessionController
from auth_front.config import AuthFrontConfig
from auth_front.domain.form import CredentialForm
from auth_front.domain.identity import SessionIdentity, Role
from auth_front.domain.submission import SubmissionState, SubmissionStatus, ErrorCategory

__all__ = [
    "AuthClient",
    "SessionController",
    "AuthFrontConfig",
    "CredentialForm",
    "SessionIdentity",
    "Role",
    "SubmissionState",
    "SubmissionStatus",
    "ErrorCategory",
]
