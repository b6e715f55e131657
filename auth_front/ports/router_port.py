"""
Router Port - Interface for moving between application views.

Implementations:
- RouteTable: static path -> view table with redirects
"""

from abc import ABC, abstractmethod


class RouterPort(ABC):
    """Port: Navigate the surrounding application."""

    @abstractmethod
    def navigate(self, path: str) -> None:
        """
        Navigate to the view mapped to a path.

        Args:
            path: Route path, e.g. "" (login), "main", "logout"

        Raises:
            LookupError: If no route matches the path
        """
        pass
