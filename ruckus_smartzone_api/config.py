"""
Connection settings for the command-line entry point.

Settings are read from the process environment, after loading a ``.env`` file
from the working directory if one exists. The library itself takes all of these
as constructor arguments and never reads the environment.

Environment variables:
    SZ_HOST (or HOST): Controller hostname or IP address.
    SZ_USER: API username. The shell's own ``USER`` is never used.
    SZ_PASS (or PASS): API password.
    SZ_API_VERSION: Public API version, default ``8_1``.
    SZ_VERIFY_SSL: ``true``/``false``, default ``false``.
    SZ_TIMEOUT: Request timeout in seconds, default ``30``.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .api_client import DEFAULT_API_VERSION, DEFAULT_TIMEOUT, SmartZoneController

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def _first(env: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return None


def getenv_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class SmartZoneSettings:
    """
    Immutable connection settings.

    Attributes:
        host: Controller hostname or IP address.
        username: API username.
        password: API password.
        api_version: Public API version.
        verify_ssl: Whether to verify the controller certificate. Most controllers
            ship a self-signed one, hence the ``False`` default.
        timeout: Request timeout in seconds.
    """

    host: str
    username: str
    password: str
    api_version: str = DEFAULT_API_VERSION
    verify_ssl: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("host cannot be empty")
        if not self.username or not self.password:
            raise ValueError("username and password are required")
        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number")

    def __repr__(self) -> str:
        return (
            f"SmartZoneSettings(host={self.host!r}, username={self.username!r}, "
            f"api_version={self.api_version!r}, verify_ssl={self.verify_ssl}, "
            f"timeout={self.timeout})"
        )

    @classmethod
    def from_env(
        cls, env: Optional[Mapping[str, str]] = None, dotenv: bool = True
    ) -> "SmartZoneSettings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read instead of ``os.environ``, mainly for tests.
            dotenv: Whether to load a ``.env`` file first. Only applies when
                reading ``os.environ``; existing variables are not overridden.

        Raises:
            ValueError: If host, username or password is missing, or a numeric
                value cannot be parsed.
        """
        if env is None:
            if dotenv:
                load_dotenv()
            env = os.environ

        host = _first(env, "SZ_HOST", "HOST")
        username = _first(env, "SZ_USER")
        password = _first(env, "SZ_PASS", "PASS")
        missing = [
            name for name, value in
            (("SZ_HOST", host), ("SZ_USER", username), ("SZ_PASS", password))
            if not value
        ]
        if missing:
            raise ValueError(f"Missing required settings: {', '.join(missing)}")

        return cls(
            host=host,
            username=username,
            password=password,
            api_version=env.get("SZ_API_VERSION") or DEFAULT_API_VERSION,
            verify_ssl=getenv_bool(env.get("SZ_VERIFY_SSL"), False),
            timeout=float(env.get("SZ_TIMEOUT") or DEFAULT_TIMEOUT),
        )

    def create_client(self) -> SmartZoneController:
        """Create an unauthenticated client for these settings."""
        return SmartZoneController(
            host=self.host,
            username=self.username,
            password=self.password,
            api_version=self.api_version,
            verify_ssl=self.verify_ssl,
            timeout=self.timeout,
        )
