"""
Cookie Probe - Check whether the session cookie can be kept between requests.
"""

import httpx


PROBE_COOKIE = "testcookie"


def cookies_enabled(cookies: httpx.Cookies, reported: bool = True) -> bool:
    """
    Decide whether cookie storage works.

    Trusts the host's flag when it says yes. Otherwise writes a probe
    cookie into the jar and checks it can be read back; the probe is
    removed afterwards.

    Args:
        cookies: Cookie jar used for backend requests
        reported: Capability flag reported by the host

    Returns:
        True if cookies are available
    """
    if reported:
        return True

    cookies.set(PROBE_COOKIE, "1")
    stored = PROBE_COOKIE in {cookie.name for cookie in cookies.jar}
    if stored:
        cookies.delete(PROBE_COOKIE)
    return stored
