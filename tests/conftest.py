import json
from typing import Any
from urllib.parse import parse_qs, urlsplit

import pytest

from arango_client import ArangoClient
from arango_client.transport.base import TransportResponse


def json_response(status: int, payload: Any, headers: dict[str, str] | None = None) -> TransportResponse:
    return TransportResponse(status=status, body=json.dumps(payload).encode("utf-8"), headers=headers or {})


def error_response(status: int, error_num: int, message: str) -> TransportResponse:
    payload = {"error": True, "code": status, "errorNum": error_num, "errorMessage": message}
    return json_response(status, payload)


class RecordingTransport:
    """Replays queued responses and records every request it receives."""

    def __init__(self) -> None:
        self.responses: list[TransportResponse] = []
        self.calls: list[dict[str, Any]] = []

    def queue(self, response: TransportResponse) -> "RecordingTransport":
        self.responses.append(response)
        return self

    def execute(self, method, url, *, headers=None, content=None) -> TransportResponse:
        parts = urlsplit(url)
        self.calls.append(
            {
                "method": method,
                "url": url,
                "path": parts.path,
                "query": {k: v[0] for k, v in parse_qs(parts.query).items()},
                "headers": dict(headers or {}),
                "body": json.loads(content) if content else None,
            }
        )
        if not self.responses:
            raise AssertionError(f"Unexpected request {method} {url}")
        return self.responses.pop(0)

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]

    def close(self) -> None:
        pass


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> ArangoClient:
    return ArangoClient(database_name="social", transport=transport)
