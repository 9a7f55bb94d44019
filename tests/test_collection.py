import pytest

from arango_client import ArgumentError, CollectionType

from conftest import error_response, json_response

COLLECTION_PATH = "/_db/social/_api/collection"


def test_create_edge_collection_with_properties(client, transport) -> None:
    transport.queue(json_response(200, {"id": "123", "name": "knows", "type": 3}))

    result = client.collection.type(CollectionType.EDGE).wait_for_sync(True).journal_size(1048576).create("knows")

    assert transport.last["method"] == "POST"
    assert transport.last["path"] == COLLECTION_PATH
    assert transport.last["body"] == {
        "name": "knows",
        "type": 3,
        "waitForSync": True,
        "journalSize": 1048576,
    }
    assert result.success
    assert result.value["type"] == 3


def test_create_duplicate_collection(client, transport) -> None:
    transport.queue(error_response(409, 1207, "duplicate name"))
    result = client.collection.create("people")
    assert result.success is False
    assert result.status_code == 409
    assert result.error.number == 1207


def test_get_count_extracts_integer(client, transport) -> None:
    transport.queue(json_response(200, {"name": "people", "count": 42}))
    result = client.collection.get_count("people")
    assert transport.last["path"] == f"{COLLECTION_PATH}/people/count"
    assert result.value == 42


def test_get_count_zero_is_still_success(client, transport) -> None:
    transport.queue(json_response(200, {"name": "people", "count": 0}))
    result = client.collection.get_count("people")
    assert result.success
    assert result.value == 0


def test_get_all_collections_excluding_system(client, transport) -> None:
    transport.queue(json_response(200, {"result": [{"name": "people"}]}))
    result = client.collection.exclude_system(True).get_all_collections()
    assert transport.last["query"] == {"excludeSystem": "true"}
    assert result.value == [{"name": "people"}]


def test_properties_truncate_and_delete(client, transport) -> None:
    transport.queue(json_response(200, {"name": "people", "waitForSync": False}))
    transport.queue(json_response(200, {"name": "people"}))
    transport.queue(json_response(200, {"id": "123"}))

    assert client.collection.get_properties("people").value["waitForSync"] is False
    assert transport.last["path"] == f"{COLLECTION_PATH}/people/properties"

    assert client.collection.truncate("people").success
    assert transport.last["method"] == "PUT"
    assert transport.last["path"] == f"{COLLECTION_PATH}/people/truncate"

    assert client.collection.delete("people").success
    assert transport.last["method"] == "DELETE"


def test_failed_validation_does_not_leak_parameters(client, transport) -> None:
    with pytest.raises(ArgumentError):
        client.collection.type(CollectionType.EDGE).is_system(True).create("")
    assert transport.calls == []

    transport.queue(json_response(200, {"id": "124", "name": "people", "type": 2}))
    client.collection.create("people")

    assert transport.last["body"] == {"name": "people"}
