"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol, runtime_checkable


@dataclass
class TransportResponse:
    """Raw outcome of one exchange. Header names are lower-cased by the transport."""

    status: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


@runtime_checkable
class Transport(Protocol):
    def execute(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: str | None = None,
    ) -> TransportResponse: ...

    def close(self) -> None: ...


__all__ = ["Transport", "TransportResponse"]
