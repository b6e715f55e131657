"""
Session Identity Domain Model - The authenticated user as returned by the backend.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple


@dataclass(frozen=True)
class Role:
    """User role (USER, ADMIN, MODERATOR)."""
    name: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {"name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Role":
        """Deserialize from dict."""
        return cls(name=data["name"])


@dataclass(frozen=True)
class SessionIdentity:
    """
    Session identity - the authenticated user projection.

    Domain rules:
    - id is required and identifies the user
    - The password never travels server -> client, so it is not a field here
    - roles keep the backend's order and are stored as a tuple
    """
    id: int
    username: str
    email: Optional[str] = None
    roles: Tuple[Role, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "roles", tuple(self.roles))

    def has_role(self, name: str) -> bool:
        """Check if the identity carries a role."""
        return any(role.name == name for role in self.roles)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "roles": [role.to_dict() for role in self.roles],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionIdentity":
        """
        Deserialize the login response body.

        Field names must match the backend entity. Unknown keys
        (including a stray "password") are ignored.

        Raises:
            KeyError: If id or username is missing
            TypeError: If the body is not an object or id is not an integer
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        user_id = data["id"]
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise TypeError(f"id must be an integer, got {user_id!r}")

        return cls(
            id=user_id,
            username=data["username"],
            email=data.get("email"),
            roles=tuple(Role.from_dict(role) for role in data.get("roles") or ()),
        )
