"""Collection management through ``_api/collection``."""

from __future__ import annotations

from typing import Any

from .parameters import CollectionType, ParameterName
from .protocol import ApiBaseUri, HttpMethod, Request, path
from .resource import Resource, field, operation
from .types import AResult


class ACollection(Resource):
    logger_name = "collection"

    def type(self, value: CollectionType) -> "ACollection":
        """Document (2) or edge (3) collection. Server default: document."""
        self._parameters.set_enum(ParameterName.TYPE, CollectionType(value))
        return self

    def wait_for_sync(self, value: bool) -> "ACollection":
        self._parameters.set_bool(ParameterName.WAIT_FOR_SYNC, value)
        return self

    def journal_size(self, value: int) -> "ACollection":
        """Maximum size of a journal or datafile in bytes."""
        self._parameters.set_int(ParameterName.JOURNAL_SIZE, value)
        return self

    def do_compact(self, value: bool) -> "ACollection":
        self._parameters.set_bool(ParameterName.DO_COMPACT, value)
        return self

    def is_system(self, value: bool) -> "ACollection":
        self._parameters.set_bool(ParameterName.IS_SYSTEM, value)
        return self

    def is_volatile(self, value: bool) -> "ACollection":
        """Keep the collection in memory only."""
        self._parameters.set_bool(ParameterName.IS_VOLATILE, value)
        return self

    def exclude_system(self, value: bool) -> "ACollection":
        self._parameters.set_bool(ParameterName.EXCLUDE_SYSTEM, value)
        return self

    @operation
    def create(self, collection_name: str) -> AResult[dict[str, Any]]:
        self._require(collection_name=collection_name)
        request = Request(HttpMethod.POST, ApiBaseUri.COLLECTION)
        body: dict[str, Any] = {ParameterName.NAME: collection_name}
        self._parameters.copy_to(
            body,
            ParameterName.TYPE,
            ParameterName.WAIT_FOR_SYNC,
            ParameterName.JOURNAL_SIZE,
            ParameterName.DO_COMPACT,
            ParameterName.IS_SYSTEM,
            ParameterName.IS_VOLATILE,
        )
        request.set_body(body)
        return self._execute(request, (200,))

    @operation
    def get(self, collection_name: str) -> AResult[dict[str, Any]]:
        self._require(collection_name=collection_name)
        request = Request(HttpMethod.GET, ApiBaseUri.COLLECTION, path(collection_name))
        return self._execute(request, (200,))

    @operation
    def get_properties(self, collection_name: str) -> AResult[dict[str, Any]]:
        self._require(collection_name=collection_name)
        request = Request(HttpMethod.GET, ApiBaseUri.COLLECTION, path(collection_name, "properties"))
        return self._execute(request, (200,))

    @operation
    def get_count(self, collection_name: str) -> AResult[int]:
        self._require(collection_name=collection_name)
        request = Request(HttpMethod.GET, ApiBaseUri.COLLECTION, path(collection_name, "count"))
        return self._execute(request, (200,), extract=field("count"))

    @operation
    def get_all_collections(self) -> AResult[list[dict[str, Any]]]:
        request = Request(HttpMethod.GET, ApiBaseUri.COLLECTION)
        request.try_set_query_string_parameter(ParameterName.EXCLUDE_SYSTEM, self._parameters)
        return self._execute(request, (200,), extract=field("result"))

    @operation
    def truncate(self, collection_name: str) -> AResult[dict[str, Any]]:
        self._require(collection_name=collection_name)
        request = Request(HttpMethod.PUT, ApiBaseUri.COLLECTION, path(collection_name, "truncate"))
        return self._execute(request, (200,))

    @operation
    def delete(self, collection_name: str) -> AResult[dict[str, Any]]:
        self._require(collection_name=collection_name)
        request = Request(HttpMethod.DELETE, ApiBaseUri.COLLECTION, path(collection_name))
        request.try_set_query_string_parameter(ParameterName.IS_SYSTEM, self._parameters)
        return self._execute(request, (200,))


__all__ = ["ACollection"]
