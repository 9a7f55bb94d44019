import base64
import json

import httpx

from arango_client import ConnectionError, Connection, Request
from arango_client.protocol import ApiBaseUri, HttpMethod, path
from arango_client.transport.base import TransportResponse
from arango_client.transport.http import HttpTransport


class DummyTransport:
    def __init__(self, response: TransportResponse | None = None, *, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def execute(self, method, url, *, headers=None, content=None) -> TransportResponse:
        self.calls.append({"method": method, "url": url, "headers": dict(headers or {}), "content": content})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response

    def close(self) -> None:  # pragma: no cover - not needed
        pass


def make_connection(transport, **kwargs) -> Connection:
    return Connection("test", "localhost", 8529, transport=transport, **kwargs)


def test_base_uri_without_database() -> None:
    connection = Connection("a", "db.example.com", 8530)
    assert connection.base_uri == "http://db.example.com:8530/"


def test_base_uri_with_database_and_tls() -> None:
    connection = Connection("a", "db.example.com", 8529, True, "social")
    assert connection.base_uri == "https://db.example.com:8529/_db/social/"


def test_send_composes_url_and_headers() -> None:
    transport = DummyTransport(TransportResponse(status=200, body=b'{"name": "g"}'))
    connection = make_connection(transport, database_name="social", username="root", password="pw")
    request = Request(HttpMethod.GET, ApiBaseUri.GRAPH, path("g"))
    request.headers["If-Match"] = "123"
    request.query_string["waitForSync"] = "true"

    response = connection.send(request)

    call = transport.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://localhost:8529/_db/social/_api/gharial/g?waitForSync=true"
    assert call["headers"]["Accept"] == "application/json"
    assert call["headers"]["If-Match"] == "123"
    token = base64.b64encode(b"root:pw").decode("ascii")
    assert call["headers"]["Authorization"] == f"Basic {token}"
    assert "Content-Type" not in call["headers"]
    assert call["content"] is None
    assert response.status_code == 200
    assert response.error is None
    assert response.parse_body() == {"name": "g"}


def test_send_sets_json_content_type_for_bodies() -> None:
    transport = DummyTransport(TransportResponse(status=202, body=b"{}"))
    connection = make_connection(transport)
    request = Request(HttpMethod.POST, ApiBaseUri.GRAPH)
    request.set_body({"name": "g"})

    connection.send(request)

    call = transport.calls[0]
    assert call["headers"]["Content-Type"].startswith("application/json")
    assert json.loads(call["content"]) == {"name": "g"}


def test_default_headers_are_sent() -> None:
    transport = DummyTransport(TransportResponse(status=200, body=b"{}"))
    connection = make_connection(transport, default_headers={"X-Test": "1"})
    connection.send(Request(HttpMethod.GET, ApiBaseUri.VERSION))
    assert transport.calls[0]["headers"]["X-Test"] == "1"


def test_error_body_is_classified_as_arango_error() -> None:
    body = b'{"error": true, "code": 404, "errorNum": 1924, "errorMessage": "graph \'g\' not found"}'
    transport = DummyTransport(TransportResponse(status=404, body=body))
    response = make_connection(transport).send(Request(HttpMethod.GET, ApiBaseUri.GRAPH, path("g")))

    assert response.status_code == 404
    assert response.error is not None
    assert response.error.is_arango_error
    assert response.error.status_code == 404
    assert response.error.number == 1924
    assert response.error.message == "ArangoDB error: graph 'g' not found"


def test_unstructured_error_is_classified_as_protocol_error() -> None:
    transport = DummyTransport(TransportResponse(status=502, body=b"Bad Gateway"))
    response = make_connection(transport).send(Request(HttpMethod.GET, ApiBaseUri.VERSION))

    assert response.error is not None
    assert response.error.is_protocol_error
    assert response.error.status_code == 502
    assert response.error.number == 0
    assert response.error.message.startswith("Protocol error: ")
    assert response.body == "Bad Gateway"


def test_not_modified_carries_error_without_body() -> None:
    transport = DummyTransport(TransportResponse(status=304, body=b""))
    response = make_connection(transport).send(Request(HttpMethod.GET, ApiBaseUri.DOCUMENT, path("c", "k")))
    assert response.body is None
    assert response.error is not None
    assert response.error.status_code == 304


def test_transport_failure_becomes_protocol_error() -> None:
    failure = ConnectionError("Cannot connect to http://localhost:8529/_api/version")
    transport = DummyTransport(error=failure)
    response = make_connection(transport).send(Request(HttpMethod.GET, ApiBaseUri.VERSION))

    assert response.status_code == 0
    assert response.error is not None
    assert response.error.is_protocol_error
    assert response.error.exception is failure


def test_malformed_hostname_becomes_protocol_error() -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    connection = Connection("test", "localhost:bad", 8529, transport=HttpTransport(client=client))

    response = connection.send(Request(HttpMethod.GET, ApiBaseUri.VERSION))

    assert response.status_code == 0
    assert response.error is not None
    assert response.error.is_protocol_error
    assert isinstance(response.error.exception, ConnectionError)
