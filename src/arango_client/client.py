"""High-level client bundling one connection with the resource APIs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .collection import ACollection
from .connection import Connection
from .database import ADatabase
from .document import ADocument
from .graph import AGraph
from .logger import LogLevel, create_logger
from .protocol import Request, Response
from .settings import (
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    ConnectionRegistry,
    ConnectionSettings,
    default_registry,
    parse_connection_url,
    settings_from_env,
)
from .transport import Transport


@dataclass
class ClientOptions:
    hostname: str = "localhost"
    port: int = DEFAULT_PORT
    is_secured: bool = False
    database_name: str | None = None
    username: str | None = None
    password: str | None = None
    alias: str = "default"
    read_timeout: float = DEFAULT_TIMEOUT
    transport: Transport | None = None
    default_headers: Mapping[str, str] | None = None
    logger: object | None = None
    log_level: LogLevel = "info"


class ArangoClient:
    """Primary entry point for talking to an ArangoDB server.

    ``client.graph``, ``client.document``, ``client.collection`` and
    ``client.database`` share the client's connection. Each resource keeps
    its own fluent parameters, so one client should not be shared between
    threads.
    """

    def __init__(
        self,
        *,
        hostname: str = "localhost",
        port: int = DEFAULT_PORT,
        is_secured: bool = False,
        database_name: str | None = None,
        username: str | None = None,
        password: str | None = None,
        alias: str = "default",
        read_timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
        default_headers: Mapping[str, str] | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        options = ClientOptions(
            hostname=hostname,
            port=port,
            is_secured=is_secured,
            database_name=database_name,
            username=username,
            password=password,
            alias=alias,
            read_timeout=read_timeout,
            transport=transport,
            default_headers=default_headers,
            logger=logger,
            log_level=log_level,
        )
        self._logger = create_logger(logger=options.logger, level=options.log_level)
        self._connection = Connection(
            options.alias,
            options.hostname,
            options.port,
            options.is_secured,
            options.database_name,
            options.username,
            options.password,
            transport=options.transport,
            read_timeout=options.read_timeout,
            default_headers=options.default_headers,
            logger=self._logger,
        )
        self._logger.info("Initializing ArangoClient for %s", self._connection.base_uri)

        self.graph = AGraph(self._connection, self._logger)
        self.document = ADocument(self._connection, self._logger)
        self.collection = ACollection(self._connection, self._logger)
        self.database = ADatabase(self._connection, self._logger)

    @classmethod
    def from_settings(cls, settings: ConnectionSettings, *, alias: str = "default", **kwargs: Any) -> "ArangoClient":
        kwargs.setdefault("read_timeout", settings.read_timeout)
        kwargs.setdefault("log_level", settings.log_level)
        return cls(
            hostname=settings.hostname,
            port=settings.port,
            is_secured=settings.is_secured,
            database_name=settings.database_name,
            username=settings.username,
            password=settings.password,
            alias=alias,
            **kwargs,
        )

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "ArangoClient":
        """Connect using ``http[s]://[user[:password]@]host[:port][/_db/name]``."""
        return cls.from_settings(parse_connection_url(url), **kwargs)

    @classmethod
    def from_alias(
        cls,
        alias: str,
        *,
        registry: ConnectionRegistry | None = None,
        **kwargs: Any,
    ) -> "ArangoClient":
        """Connect using settings registered under ``alias``."""
        settings = (registry or default_registry).get_connection(alias)
        return cls.from_settings(settings, alias=alias, **kwargs)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **kwargs: Any) -> "ArangoClient":
        """Connect using the ``ARANGO_*`` environment variables."""
        return cls.from_settings(settings_from_env(environ), **kwargs)

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def base_uri(self) -> str:
        return self._connection.base_uri

    def send(self, request: Request) -> Response:
        """Send a hand-built request for endpoints without a resource API."""
        return self._connection.send(request)

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> "ArangoClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["ArangoClient", "ClientOptions"]
