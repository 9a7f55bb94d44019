"""Shared plumbing for the per-resource API clients."""

from __future__ import annotations

import functools
from typing import Any, Callable, Collection, TypeVar

from .connection import Connection
from .documents import from_document
from .errors import ArgumentError, ParseError
from .logger import BoundLogger, create_logger
from .parameters import Parameters
from .protocol import Request, Response
from .types import AError, AResult

PRECONDITION_FAILED = 412

F = TypeVar("F", bound=Callable[..., Any])


def operation(method: F) -> F:
    """Clear the fluent parameters once the wrapped call returns or raises."""

    @functools.wraps(method)
    def wrapper(self: "Resource", *args: Any, **kwargs: Any) -> Any:
        try:
            return method(self, *args, **kwargs)
        finally:
            self._parameters.clear()

    return wrapper  # type: ignore[return-value]


class Resource:
    """Base class holding the connection and the fluent parameter map.

    Public calls are wrapped with ``operation`` so parameters never outlive
    the call they were set for, even when building the request fails.
    """

    logger_name = "resource"

    def __init__(self, connection: Connection, logger: BoundLogger | None = None) -> None:
        self._connection = connection
        self._parameters = Parameters()
        self._logger = (logger or create_logger()).child(self.logger_name)

    def _require(self, **values: str) -> None:
        for name, value in values.items():
            if not value:
                raise ArgumentError(f"'{name}' must not be empty")

    def _execute(
        self,
        request: Request,
        success: Collection[int],
        *,
        precondition_value: bool = False,
        model: Callable[..., Any] | None = None,
        extract: Callable[[Any], Any] | None = None,
    ) -> AResult[Any]:
        """Send ``request`` and interpret its status code.

        Statuses in ``success`` parse the body into ``value``; a 412 does the
        same without marking the result successful when ``precondition_value``
        is set.
        """
        self._logger.trace("%r", request)
        response = self._connection.send(request)
        result: AResult[Any] = AResult.from_response(response)

        if response.status_code in success:
            result.value = self._parse(response, result, model=model, extract=extract)
            result.success = result.value is not None
            if not result.success and result.error is None:
                result.error = AError.protocol(response.status_code, "response body carries no document")
        elif response.status_code == PRECONDITION_FAILED and precondition_value:
            result.value = self._parse(response, result)
        elif result.error is None:
            result.error = AError.protocol(
                response.status_code,
                f"unexpected HTTP status {response.status_code}",
            )
        return result

    def _parse(
        self,
        response: Response,
        result: AResult[Any],
        *,
        model: Callable[..., Any] | None = None,
        extract: Callable[[Any], Any] | None = None,
    ) -> Any:
        try:
            value = response.parse_body()
            if value is not None and extract is not None:
                value = extract(value)
            if value is not None and model is not None:
                value = from_document(model, value)
            return value
        except ParseError as exc:
            self._logger.warn("Cannot decode response body: %s", exc)
            result.error = AError.protocol(response.status_code, str(exc), exc)
            return None


def field(name: str) -> Callable[[Any], Any]:
    """Extractor returning one attribute of a response document."""

    def _extract(document: Any) -> Any:
        if isinstance(document, dict):
            return document.get(name)
        return None

    return _extract


__all__ = ["PRECONDITION_FAILED", "Resource", "field", "operation"]
