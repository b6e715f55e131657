"""
Configuration - Backend location and login routing.

Injected at construction; nothing here is read implicitly at import time.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


ENV_PREFIX = "AUTH_FRONT_"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AuthFrontConfig:
    """
    Login front end configuration.

    Attributes:
        backend_url: Backend root URL
        login_path: Login endpoint path (appended to backend_url)
        timeout: HTTP timeout in seconds, applied by the transport
        after_login_path: Route to show after a successful login
        logout_path: Route to show after logout
        cookies_enabled: Host-reported cookie capability. Only a hint: when
            false, AuthClient probes the transport's cookie jar and the probe
            decides persistent_session. A default httpx jar stores cookies, so
            false usually still ends up as persistent_session=True.
    """
    backend_url: str = "http://localhost:8080"
    login_path: str = "/auth/login"
    timeout: float = 10.0
    after_login_path: str = "main"
    logout_path: str = "logout"
    cookies_enabled: bool = True

    def __post_init__(self):
        if not self.backend_url.startswith(("http://", "https://")):
            raise ValueError(f"backend_url must be an http(s) URL, got {self.backend_url!r}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AuthFrontConfig":
        """
        Build config from AUTH_FRONT_* environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If a value cannot be parsed or is out of range
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str, default: str) -> str:
            return env.get(ENV_PREFIX + name, default)

        timeout_raw = get("TIMEOUT", str(defaults.timeout))
        try:
            timeout = float(timeout_raw)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}TIMEOUT must be a number, got {timeout_raw!r}") from None

        cookies_raw = get("COOKIES_ENABLED", "1")

        return cls(
            backend_url=get("BACKEND_URL", defaults.backend_url),
            login_path=get("LOGIN_PATH", defaults.login_path),
            timeout=timeout,
            after_login_path=get("AFTER_LOGIN_PATH", defaults.after_login_path),
            logout_path=get("LOGOUT_PATH", defaults.logout_path),
            cookies_enabled=cookies_raw.strip().lower() not in _FALSE_VALUES,
        )
