"""Shared value types: body kinds, classified errors and per-call results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

from .errors import ArangoError

if TYPE_CHECKING:
    from .protocol import Response

T = TypeVar("T")

ErrorKind = Literal["arango", "protocol"]

ARANGO_ERROR_PREFIX = "ArangoDB error: "
PROTOCOL_ERROR_PREFIX = "Protocol error: "


class BodyType(str, Enum):
    NONE = "none"
    TEXT = "text"
    DOCUMENT = "document"
    LIST = "list"


@dataclass
class AError:
    """Classified failure of a single API call."""

    status_code: int
    number: int
    message: str
    kind: ErrorKind = "protocol"
    exception: BaseException | None = None

    @classmethod
    def arango(cls, status_code: int, number: int, message: str) -> "AError":
        return cls(status_code, number, ARANGO_ERROR_PREFIX + message, kind="arango")

    @classmethod
    def protocol(
        cls,
        status_code: int,
        detail: str,
        exception: BaseException | None = None,
    ) -> "AError":
        return cls(status_code, 0, PROTOCOL_ERROR_PREFIX + detail, kind="protocol", exception=exception)

    @property
    def is_arango_error(self) -> bool:
        return self.kind == "arango"

    @property
    def is_protocol_error(self) -> bool:
        return self.kind == "protocol"


@dataclass
class AResult(Generic[T]):
    """Parsed value plus success/error status for one API call."""

    status_code: int = 0
    success: bool = False
    value: T | None = None
    error: AError | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, response: "Response") -> "AResult[T]":
        return cls(status_code=response.status_code, error=response.error)

    def unwrap(self) -> T:
        """Return the value or raise ``ArangoError`` for an unsuccessful call."""
        if self.success:
            return self.value  # type: ignore[return-value]
        if self.error is not None:
            raise ArangoError(
                self.error.message,
                status_code=self.error.status_code,
                number=self.error.number,
                context=self,
            )
        raise ArangoError(
            f"Request was not successful (status {self.status_code})",
            status_code=self.status_code,
            context=self,
        )


__all__ = ["AError", "AResult", "BodyType", "ErrorKind"]
