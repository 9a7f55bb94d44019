"""HTTP transport built on top of httpx."""

from __future__ import annotations

from typing import Mapping

import httpx

from ..errors import ConnectionError
from ..logger import BoundLogger, create_logger
from .base import TransportResponse


class HttpTransport:
    """Sends one request per call through a shared ``httpx.Client``."""

    def __init__(
        self,
        *,
        read_timeout: float = 60.0,
        verify: bool = True,
        client: httpx.Client | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._read_timeout = read_timeout
        self._client = client or httpx.Client(timeout=httpx.Timeout(read_timeout), verify=verify)
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("http")

    def execute(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: str | None = None,
    ) -> TransportResponse:
        payload = content.encode("utf-8") if content is not None else None

        try:
            self._logger.debug("HTTP %s %s bytes=%d", method, url, len(payload or b""))
            response = self._client.request(method, url, content=payload, headers=dict(headers or {}))
            body = response.content
            self._logger.debug(
                "HTTP <- %s %s status=%s bytes=%d",
                method,
                url,
                response.status_code,
                len(body),
            )
            return TransportResponse(
                status=response.status_code,
                body=body,
                headers={k.lower(): v for k, v in response.headers.items()},
            )
        except httpx.TimeoutException as exc:
            raise ConnectionError(f"HTTP request timeout after {self._read_timeout}s") from exc
        except httpx.RequestError as exc:
            raise ConnectionError(f"Cannot connect to {url}: {exc}") from exc
        except httpx.InvalidURL as exc:
            raise ConnectionError(f"Invalid URL {url}: {exc}") from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = ["HttpTransport"]
