"""Endpoint description and the single blocking HTTP exchange."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import quote

from .auth import AuthManager
from .errors import ConnectionError
from .logger import BoundLogger, create_logger
from .parser import decode_body, extract_arango_error
from .protocol import Request, Response
from .transport import HttpTransport, Transport, TransportResponse
from .types import AError

DEFAULT_PORT = 8529
JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class Connection:
    """Stores data about a single endpoint and exchanges requests with it."""

    def __init__(
        self,
        alias: str,
        hostname: str,
        port: int = DEFAULT_PORT,
        is_secured: bool = False,
        database_name: str | None = None,
        username: str | None = None,
        password: str | None = None,
        *,
        transport: Transport | None = None,
        read_timeout: float = 60.0,
        default_headers: Mapping[str, str] | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self.alias = alias
        self.hostname = hostname
        self.port = int(port)
        self.is_secured = is_secured
        self.database_name = database_name or None
        self.username = username
        self.password = password
        self.read_timeout = read_timeout
        self._logger = (logger or create_logger()).child("connection")
        self._auth_manager = AuthManager(username, password, self._logger)
        self._default_headers = dict(default_headers or {})
        self._transport: Transport | None = transport

        scheme = "https" if is_secured else "http"
        base = f"{scheme}://{hostname}:{self.port}/"
        if self.database_name:
            base += f"_db/{quote(self.database_name, safe='')}/"
        self.base_uri = base

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpTransport(read_timeout=self.read_timeout, logger=self._logger)
        return self._transport

    def send(self, request: Request) -> Response:
        """Dispatch ``request`` once and classify the outcome.

        Transport failures are not raised; they come back as a response with
        status code 0 and a protocol error carrying the original exception.
        """
        url = self.base_uri + request.relative_uri()
        headers = self._build_headers(request)

        try:
            raw = self.transport.execute(request.method, url, headers=headers, content=request.body)
        except ConnectionError as exc:
            self._logger.warn("%s %s failed: %s", request.method, url, exc)
            return Response(status_code=0, error=AError.protocol(0, str(exc), exc))

        return self._build_response(raw)

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()

    def _build_headers(self, request: Request) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        headers.update(self._default_headers)
        headers.update(request.headers)
        headers = self._auth_manager.add_http_headers(headers)
        if request.body is not None and request.body != "":
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    def _build_response(self, raw: TransportResponse) -> Response:
        response = Response(status_code=raw.status, headers=dict(raw.headers))
        text = decode_body(raw.body)
        if text:
            response.body = text
            response.detect_body_type()

        if response.is_success_status:
            return response

        error = extract_arango_error(response.body, response.body_type)
        if error is None:
            error = AError.protocol(response.status_code, f"unexpected HTTP status {response.status_code}")
        response.error = error
        self._logger.debug(
            "Request failed status=%d errorNum=%d message=%s",
            error.status_code,
            error.number,
            error.message,
        )
        return response

    def __repr__(self) -> str:
        return f"Connection(alias={self.alias!r}, base_uri={self.base_uri!r})"


__all__ = ["DEFAULT_PORT", "Connection"]
