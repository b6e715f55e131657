"""
Route Table Adapter - Implements RouterPort with a static path table.
"""

from enum import Enum
from typing import Dict, List, Optional
from auth_front.ports.router_port import RouterPort


class View(Enum):
    """Application views reachable by path."""
    LOGIN = "login"
    MAIN = "main"


class RouteNotFoundError(LookupError):
    """No route matches a path."""


DEFAULT_ROUTES: Dict[str, View] = {
    "": View.LOGIN,
    "main": View.MAIN,
}

DEFAULT_REDIRECTS: Dict[str, str] = {
    "logout": "",
    "index": "",
}


class RouteTable(RouterPort):
    """
    Static path -> view table with full-path redirects.

    Paths are compared without leading/trailing slashes, so "/index/"
    and "index" are the same route.
    """

    def __init__(
        self,
        routes: Optional[Dict[str, View]] = None,
        redirects: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize route table.

        Args:
            routes: Path -> view (default: "" login, "main" main)
            redirects: Path -> target path (default: logout, index -> "")
        """
        self._routes = dict(DEFAULT_ROUTES if routes is None else routes)
        self._redirects = dict(DEFAULT_REDIRECTS if redirects is None else redirects)
        self._current: Optional[View] = None
        self.history: List[View] = []

    @property
    def current(self) -> Optional[View]:
        """View shown right now (None before the first navigation)."""
        return self._current

    def resolve(self, path: str) -> View:
        """
        Resolve a path to a view, following redirects.

        Raises:
            RouteNotFoundError: If the path (or a redirect target) is unknown,
                                or redirects loop
        """
        path = path.strip("/")
        seen = set()

        while path in self._redirects:
            if path in seen:
                raise RouteNotFoundError(f"Redirect loop at '{path}'")
            seen.add(path)
            path = self._redirects[path].strip("/")

        view = self._routes.get(path)
        if view is None:
            raise RouteNotFoundError(f"Cannot match any routes for '{path}'")
        return view

    def navigate(self, path: str) -> None:
        """Show the view for a path."""
        view = self.resolve(path)
        self._current = view
        self.history.append(view)
