"""Single-document CRUD through ``_api/document``."""

from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar

from .errors import ArgumentError
from .parameters import ParameterName
from .protocol import ApiBaseUri, HttpMethod, Request, path
from .resource import Resource, operation
from .types import AError, AResult

T = TypeVar("T")


def split_document_id(document_id: str) -> tuple[str, str]:
    """Split ``collection/key`` into its parts, raising ``ArgumentError`` otherwise."""
    parts = document_id.split("/") if isinstance(document_id, str) else []
    if len(parts) != 2 or not all(parts):
        raise ArgumentError(f"Specified id value ({document_id!r}) has invalid format")
    return parts[0], parts[1]


def _header(headers: Mapping[str, str], name: str) -> str:
    name = name.lower()
    return next((value for key, value in headers.items() if key.lower() == name), "")


class ADocument(Resource):
    logger_name = "document"

    def wait_for_sync(self, value: bool) -> "ADocument":
        self._parameters.set_bool(ParameterName.WAIT_FOR_SYNC, value)
        return self

    def if_match(self, revision: str) -> "ADocument":
        self._parameters.set_string(ParameterName.IF_MATCH, revision)
        return self

    def if_none_match(self, revision: str) -> "ADocument":
        """Fetch only if the stored revision differs; a match yields 304."""
        self._parameters.set_string(ParameterName.IF_NONE_MATCH, revision)
        return self

    def keep_null(self, value: bool) -> "ADocument":
        self._parameters.set_string(ParameterName.KEEP_NULL, "true" if value else "false")
        return self

    def merge_objects(self, value: bool) -> "ADocument":
        self._parameters.set_bool(ParameterName.MERGE_OBJECTS, value)
        return self

    def return_new(self, value: bool) -> "ADocument":
        self._parameters.set_bool(ParameterName.RETURN_NEW, value)
        return self

    def return_old(self, value: bool) -> "ADocument":
        self._parameters.set_bool(ParameterName.RETURN_OLD, value)
        return self

    @operation
    def create(self, collection_name: str, document: Any) -> AResult[dict[str, Any]]:
        self._require(collection_name=collection_name)
        request = Request(HttpMethod.POST, ApiBaseUri.DOCUMENT, path(collection_name))
        request.try_set_query_string_parameter(ParameterName.WAIT_FOR_SYNC, self._parameters)
        request.try_set_query_string_parameter(ParameterName.RETURN_NEW, self._parameters)
        request.set_body(document)
        return self._execute(request, (201, 202))

    @operation
    def get(self, document_id: str, model: Callable[..., T] | None = None) -> AResult[Any]:
        request = self._document_request(HttpMethod.GET, document_id)
        request.try_set_header_parameter(ParameterName.IF_MATCH, self._parameters)
        request.try_set_header_parameter(ParameterName.IF_NONE_MATCH, self._parameters)
        return self._execute(request, (200,), precondition_value=True, model=model)

    @operation
    def check(self, document_id: str) -> AResult[str]:
        """Return the current revision of a document without fetching its body."""
        request = self._document_request(HttpMethod.HEAD, document_id)
        request.try_set_header_parameter(ParameterName.IF_MATCH, self._parameters)
        request.try_set_header_parameter(ParameterName.IF_NONE_MATCH, self._parameters)
        response = self._connection.send(request)

        result: AResult[str] = AResult.from_response(response)
        if response.status_code == 200:
            result.value = _header(response.headers, "etag").strip('"') or None
            result.success = result.value is not None
            if not result.success:
                result.error = AError.protocol(200, "response carries no ETag header")
        elif result.error is None:
            result.error = AError.protocol(
                response.status_code,
                f"unexpected HTTP status {response.status_code}",
            )
        return result

    @operation
    def update(self, document_id: str, document: Any) -> AResult[dict[str, Any]]:
        request = self._document_request(HttpMethod.PATCH, document_id)
        request.try_set_query_string_parameter(ParameterName.WAIT_FOR_SYNC, self._parameters)
        request.try_set_query_string_parameter(ParameterName.KEEP_NULL, self._parameters)
        request.try_set_query_string_parameter(ParameterName.MERGE_OBJECTS, self._parameters)
        request.try_set_query_string_parameter(ParameterName.RETURN_NEW, self._parameters)
        request.try_set_query_string_parameter(ParameterName.RETURN_OLD, self._parameters)
        request.try_set_header_parameter(ParameterName.IF_MATCH, self._parameters)
        request.set_body(document)
        return self._execute(request, (201, 202), precondition_value=True)

    @operation
    def replace(self, document_id: str, document: Any) -> AResult[dict[str, Any]]:
        request = self._document_request(HttpMethod.PUT, document_id)
        request.try_set_query_string_parameter(ParameterName.WAIT_FOR_SYNC, self._parameters)
        request.try_set_query_string_parameter(ParameterName.RETURN_NEW, self._parameters)
        request.try_set_query_string_parameter(ParameterName.RETURN_OLD, self._parameters)
        request.try_set_header_parameter(ParameterName.IF_MATCH, self._parameters)
        request.set_body(document)
        return self._execute(request, (201, 202), precondition_value=True)

    @operation
    def delete(self, document_id: str) -> AResult[dict[str, Any]]:
        request = self._document_request(HttpMethod.DELETE, document_id)
        request.try_set_query_string_parameter(ParameterName.WAIT_FOR_SYNC, self._parameters)
        request.try_set_query_string_parameter(ParameterName.RETURN_OLD, self._parameters)
        request.try_set_header_parameter(ParameterName.IF_MATCH, self._parameters)
        return self._execute(request, (200, 202), precondition_value=True)

    def _document_request(self, method: str, document_id: str) -> Request:
        collection_name, key = split_document_id(document_id)
        return Request(method, ApiBaseUri.DOCUMENT, path(collection_name, key))


__all__ = ["ADocument", "split_document_id"]
