"""
Unit tests for the Route Table adapter.
"""

import pytest
from auth_front.adapters.route_table import RouteTable, RouteNotFoundError, View


def test_default_routes():
    """Test root is the login view and main is reachable."""
    router = RouteTable()

    assert router.resolve("") == View.LOGIN
    assert router.resolve("main") == View.MAIN


@pytest.mark.parametrize("path", ["logout", "index", "/logout", "index/"])
def test_redirects_to_login(path):
    """Test logout and index redirect to the login view."""
    router = RouteTable()

    router.navigate(path)

    assert router.current == View.LOGIN


def test_navigation_history():
    """Test navigate records visited views."""
    router = RouteTable()
    assert router.current is None

    router.navigate("")
    router.navigate("main")
    router.navigate("logout")

    assert router.history == [View.LOGIN, View.MAIN, View.LOGIN]


def test_unknown_route():
    """Test unknown paths raise and keep the current view."""
    router = RouteTable()
    router.navigate("")

    with pytest.raises(RouteNotFoundError):
        router.navigate("admin")

    assert router.current == View.LOGIN


def test_redirect_loop():
    """Test redirect loops are detected."""
    router = RouteTable(redirects={"a": "b", "b": "a"})

    with pytest.raises(RouteNotFoundError):
        router.resolve("a")


def test_route_not_found_is_lookup_error():
    """Test RouteNotFoundError honours the RouterPort contract."""
    assert issubclass(RouteNotFoundError, LookupError)
