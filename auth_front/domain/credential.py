"""
Credentials Domain Model - Transient login credentials.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Credentials:
    """
    Credentials value object - what the user typed into the login form.

    Domain rules:
    - Never persisted; lives only for one submission
    - secret is masked in repr() so it cannot leak into logs
    - Wire field names are the backend's: username / password
    """
    identifier: str
    secret: str

    def to_payload(self) -> Dict[str, str]:
        """Serialize to the login request body."""
        return {
            "username": self.identifier,
            "password": self.secret,
        }

    def __repr__(self) -> str:
        return f"Credentials(identifier={self.identifier!r}, secret='***')"
