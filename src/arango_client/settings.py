"""Connection settings: URL parsing, environment configuration and the alias registry."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping
from urllib.parse import unquote, urlparse

from .errors import ConnectionNotFoundError
from .logger import LOG_LEVEL_PRIORITY, LogLevel

DEFAULT_HOSTNAME = "localhost"
DEFAULT_PORT = 8529
DEFAULT_TIMEOUT = 60.0

ENV_URL = "ARANGO_URL"
ENV_DATABASE = "ARANGO_DATABASE"
ENV_USERNAME = "ARANGO_USERNAME"
ENV_PASSWORD = "ARANGO_PASSWORD"
ENV_TIMEOUT = "ARANGO_TIMEOUT"
ENV_LOG_LEVEL = "ARANGO_LOG_LEVEL"


@dataclass(frozen=True)
class ConnectionSettings:
    hostname: str = DEFAULT_HOSTNAME
    port: int = DEFAULT_PORT
    is_secured: bool = False
    database_name: str | None = None
    username: str | None = None
    password: str | None = None
    read_timeout: float = DEFAULT_TIMEOUT
    log_level: LogLevel = "info"


def parse_connection_url(url: str) -> ConnectionSettings:
    """Parse ``http[s]://[user[:password]@]host[:port][/_db/name]``.

    A missing scheme means http; a missing port means 8529.
    """
    parsed = urlparse(_normalize_url(url))
    scheme = parsed.scheme or "http"
    if scheme not in {"http", "https"}:
        raise ValueError(f"Unsupported scheme: {scheme}")

    database_name = None
    segments = [segment for segment in parsed.path.split("/") if segment]
    if len(segments) >= 2 and segments[0] == "_db":
        database_name = unquote(segments[1])
    elif segments:
        raise ValueError(f"Unsupported connection path: {parsed.path}")

    return ConnectionSettings(
        hostname=parsed.hostname or DEFAULT_HOSTNAME,
        port=parsed.port or DEFAULT_PORT,
        is_secured=scheme == "https",
        database_name=database_name,
        username=unquote(parsed.username) if parsed.username else None,
        password=unquote(parsed.password) if parsed.password else None,
    )


def settings_from_env(environ: Mapping[str, str] | None = None) -> ConnectionSettings:
    """Build settings from ``ARANGO_*`` environment variables."""
    env = os.environ if environ is None else environ
    settings = parse_connection_url(env.get(ENV_URL) or f"http://{DEFAULT_HOSTNAME}:{DEFAULT_PORT}")

    overrides: dict[str, object] = {}
    if env.get(ENV_DATABASE):
        overrides["database_name"] = env[ENV_DATABASE]
    if env.get(ENV_USERNAME):
        overrides["username"] = env[ENV_USERNAME]
    if env.get(ENV_PASSWORD):
        overrides["password"] = env[ENV_PASSWORD]
    if env.get(ENV_TIMEOUT):
        try:
            overrides["read_timeout"] = float(env[ENV_TIMEOUT])
        except ValueError as exc:
            raise ValueError(f"{ENV_TIMEOUT} must be a number, got {env[ENV_TIMEOUT]!r}") from exc
    if env.get(ENV_LOG_LEVEL):
        level = env[ENV_LOG_LEVEL].lower()
        if level not in LOG_LEVEL_PRIORITY:
            raise ValueError(f"{ENV_LOG_LEVEL} must be one of {', '.join(LOG_LEVEL_PRIORITY)}")
        overrides["log_level"] = level
    return replace(settings, **overrides)  # type: ignore[arg-type]


class ConnectionRegistry:
    """Named connection settings, looked up by alias."""

    def __init__(self) -> None:
        self._connections: dict[str, ConnectionSettings] = {}

    def add_connection(
        self,
        alias: str,
        hostname: str,
        port: int = DEFAULT_PORT,
        is_secured: bool = False,
        database_name: str | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> ConnectionSettings:
        settings = ConnectionSettings(
            hostname=hostname,
            port=int(port),
            is_secured=is_secured,
            database_name=database_name,
            username=username,
            password=password,
        )
        return self.register(alias, settings)

    def add_connection_string(self, alias: str, url: str) -> ConnectionSettings:
        return self.register(alias, parse_connection_url(url))

    def register(self, alias: str, settings: ConnectionSettings) -> ConnectionSettings:
        if not alias:
            raise ValueError("Connection alias must not be empty")
        self._connections[alias] = settings
        return settings

    def has_connection(self, alias: str) -> bool:
        return alias in self._connections

    def get_connection(self, alias: str) -> ConnectionSettings:
        try:
            return self._connections[alias]
        except KeyError:
            raise ConnectionNotFoundError(f"No connection registered under alias {alias!r}") from None

    def remove_connection(self, alias: str) -> None:
        self._connections.pop(alias, None)

    def aliases(self) -> list[str]:
        return sorted(self._connections)

    def clear(self) -> None:
        self._connections.clear()


def _normalize_url(url: str) -> str:
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return "http://" + url
    return url


default_registry = ConnectionRegistry()

add_connection = default_registry.add_connection
add_connection_string = default_registry.add_connection_string
has_connection = default_registry.has_connection
get_connection = default_registry.get_connection
remove_connection = default_registry.remove_connection


__all__ = [
    "ConnectionRegistry",
    "ConnectionSettings",
    "add_connection",
    "add_connection_string",
    "default_registry",
    "get_connection",
    "has_connection",
    "parse_connection_url",
    "remove_connection",
    "settings_from_env",
]
