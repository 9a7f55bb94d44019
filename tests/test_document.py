import pytest

from arango_client import ArgumentError
from arango_client.document import split_document_id
from arango_client.transport.base import TransportResponse

from conftest import error_response, json_response

DOCUMENT_PATH = "/_db/social/_api/document"


class Note:
    def __init__(self, title: str, body: str) -> None:
        self.title = title
        self.body = body


@pytest.mark.parametrize("bad_id", ["", "people", "people/", "/1", "a/b/c"])
def test_split_document_id_rejects_invalid_ids(bad_id) -> None:
    with pytest.raises(ArgumentError):
        split_document_id(bad_id)


def test_split_document_id() -> None:
    assert split_document_id("people/1") == ("people", "1")


def test_create_document_from_plain_object(client, transport) -> None:
    transport.queue(json_response(201, {"_id": "notes/1", "_key": "1", "_rev": "r1"}))

    result = client.document.wait_for_sync(True).return_new(True).create("notes", Note("hi", "there"))

    assert transport.last["method"] == "POST"
    assert transport.last["path"] == f"{DOCUMENT_PATH}/notes"
    assert transport.last["query"] == {"waitForSync": "true", "returnNew": "true"}
    assert transport.last["body"] == {"title": "hi", "body": "there"}
    assert result.success
    assert result.value["_key"] == "1"


def test_create_document_unknown_collection(client, transport) -> None:
    transport.queue(error_response(404, 1203, "collection or view not found"))
    result = client.document.create("missing", {"a": 1})
    assert result.success is False
    assert result.error.number == 1203


def test_get_document_with_if_none_match_not_modified(client, transport) -> None:
    transport.queue(TransportResponse(status=304, body=b""))

    result = client.document.if_none_match("r1").get("notes/1")

    assert transport.last["path"] == f"{DOCUMENT_PATH}/notes/1"
    assert transport.last["headers"]["If-None-Match"] == "r1"
    assert result.success is False
    assert result.status_code == 304
    assert result.error.status_code == 304


def test_get_document_builds_model(client, transport) -> None:
    transport.queue(json_response(200, {"_key": "1", "title": "hi", "body": "there"}))

    result = client.document.get("notes/1", model=lambda **doc: (doc["title"], doc["body"]))

    assert result.value == ("hi", "there")


def test_check_returns_revision_from_etag(client, transport) -> None:
    transport.queue(TransportResponse(status=200, body=b"", headers={"etag": '"_abc123"'}))

    result = client.document.check("notes/1")

    assert transport.last["method"] == "HEAD"
    assert result.success
    assert result.value == "_abc123"


def test_check_missing_document(client, transport) -> None:
    transport.queue(TransportResponse(status=404, body=b""))
    result = client.document.check("notes/2")
    assert result.success is False
    assert result.error.is_protocol_error


def test_update_document_with_revision_conflict(client, transport) -> None:
    payload = {"error": True, "code": 412, "errorNum": 1200, "errorMessage": "conflict", "_rev": "r9"}
    transport.queue(json_response(412, payload))

    result = client.document.if_match("r1").keep_null(False).merge_objects(False).update("notes/1", {"a": None})

    assert transport.last["method"] == "PATCH"
    assert transport.last["query"] == {"keepNull": "false", "mergeObjects": "false"}
    assert transport.last["headers"]["If-Match"] == "r1"
    assert result.success is False
    assert result.value["_rev"] == "r9"


def test_replace_and_delete(client, transport) -> None:
    transport.queue(json_response(202, {"_rev": "r2"}))
    transport.queue(json_response(200, {"_key": "1"}))

    replaced = client.document.return_old(True).replace("notes/1", {"title": "new"})
    assert transport.last["method"] == "PUT"
    assert transport.last["query"] == {"returnOld": "true"}
    assert replaced.success

    deleted = client.document.delete("notes/1")
    assert transport.last["method"] == "DELETE"
    assert transport.last["query"] == {}
    assert deleted.success


def test_invalid_id_clears_parameters(client, transport) -> None:
    with pytest.raises(ArgumentError):
        client.document.wait_for_sync(True).delete("no-slash")
    assert transport.calls == []

    transport.queue(json_response(200, {"_key": "1"}))
    client.document.delete("notes/1")
    assert transport.last["query"] == {}


def test_check_reads_etag_header_in_any_case(client, transport) -> None:
    transport.queue(TransportResponse(status=200, body=b"", headers={"ETag": '"_abc124"'}))
    result = client.document.check("notes/1")
    assert result.success
    assert result.value == "_abc124"


def test_check_without_etag_is_protocol_error(client, transport) -> None:
    transport.queue(TransportResponse(status=200, body=b""))
    result = client.document.check("notes/1")
    assert result.success is False
    assert result.value is None
    assert result.error.is_protocol_error


@pytest.mark.parametrize(
    "method_name, args",
    [
        ("create", ("notes", {"title": "hi"})),
        ("update", ("notes/1", {"title": "hi"})),
        ("replace", ("notes/1", {"title": "hi"})),
    ],
)
def test_unlisted_success_status_is_protocol_error(client, transport, method_name, args) -> None:
    transport.queue(json_response(200, {"_id": "notes/1", "_rev": "r2"}))

    result = getattr(client.document, method_name)(*args)

    assert result.success is False
    assert result.status_code == 200
    assert result.value is None
    assert result.error.is_protocol_error
    assert result.error.status_code == 200
    assert "unexpected HTTP status 200" in result.error.message


def test_parameters_are_cleared_when_document_cannot_be_serialized(client, transport) -> None:
    with pytest.raises(ArgumentError):
        client.document.if_match("r1").wait_for_sync(True).update("notes/1", {"when": object()})
    with pytest.raises(ArgumentError):
        client.document.return_new(True).create("notes", 7)
    assert transport.calls == []

    transport.queue(json_response(201, {"_id": "notes/2"}))
    client.document.create("notes", [{"title": "a", "tags": ["x", ["y"]]}, Note("b", "c")])

    assert transport.last["query"] == {}
    assert "If-Match" not in transport.last["headers"]
    assert transport.last["body"] == [
        {"title": "a", "tags": ["x", ["y"]]},
        {"title": "b", "body": "c"},
    ]
