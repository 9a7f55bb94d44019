"""Custom exceptions raised by the ArangoDB Python client.

API calls report server-side failures through ``AResult.error``; the
exceptions below cover misuse, configuration problems and explicit unwrapping.
"""

from __future__ import annotations

from typing import Any


class ArangoClientError(Exception):
    """Base error for all client failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConnectionError(ArangoClientError):
    """Raised by a transport when the server cannot be reached."""


class ConnectionNotFoundError(ArangoClientError, KeyError):
    """Raised when no connection is registered under the requested alias."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ArgumentError(ArangoClientError, ValueError):
    """Raised when an argument has an invalid format, e.g. a document id."""


class ParseError(ArangoClientError):
    """Raised when a response body cannot be decoded."""


class ArangoError(ArangoClientError):
    """Raised by ``AResult.unwrap()`` for unsuccessful results."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 0,
        number: int = 0,
        context: Any | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.status_code = status_code
        self.number = number


__all__ = [
    "ArangoClientError",
    "ArangoError",
    "ArgumentError",
    "ConnectionError",
    "ConnectionNotFoundError",
    "ParseError",
]
