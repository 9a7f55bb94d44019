"""Named graph management, vertices and edges (the ``_api/gharial`` endpoints)."""

from __future__ import annotations

import json
from typing import Any, Callable, Sequence, TypeVar

from .documents import to_document
from .errors import ArgumentError
from .parameters import ParameterName
from .protocol import ApiBaseUri, HttpMethod, Request, path
from .resource import Resource, field, operation
from .types import AResult

T = TypeVar("T")


def _unwrap(key: str) -> Callable[[Any], Any]:
    """Return ``document[key]`` when the server wrapped the payload, else the document."""

    def _extract(document: Any) -> Any:
        if isinstance(document, dict) and isinstance(document.get(key), dict):
            return document[key]
        return document

    return _extract


class AGraph(Resource):
    """Operations on named graphs.

    Optional parameters are set fluently and apply to the next call only::

        result = client.graph.wait_for_sync(True).create_vertex("social", "people", {"name": "Ada"})
    """

    logger_name = "graph"

    # parameters

    def wait_for_sync(self, value: bool) -> "AGraph":
        """Wait until data are synchronised to disk. Server default: false."""
        self._parameters.set_bool(ParameterName.WAIT_FOR_SYNC, value)
        return self

    def if_match(self, revision: str) -> "AGraph":
        """Operate only on the document with the given revision."""
        self._parameters.set_string(ParameterName.IF_MATCH, revision)
        return self

    def keep_null(self, value: bool) -> "AGraph":
        """Keep attributes set to null in a patch. Server default: true."""
        self._parameters.set_string(ParameterName.KEEP_NULL, "true" if value else "false")
        return self

    def drop_collection(self, value: bool) -> "AGraph":
        """Drop the collection too when removing it from a graph."""
        self._parameters.set_bool(ParameterName.DROP_COLLECTION, value)
        return self

    def drop_collections(self, value: bool) -> "AGraph":
        """Drop all collections of a graph that no other graph uses when deleting it."""
        self._parameters.set_bool(ParameterName.DROP_COLLECTIONS, value)
        return self

    # graphs

    @operation
    def create(
        self,
        graph_name: str,
        edge_definitions: Sequence[dict[str, Any]] | None = None,
        orphan_collections: Sequence[str] | None = None,
    ) -> AResult[dict[str, Any]]:
        """Create a new graph in the current database."""
        self._require(graph_name=graph_name)
        request = Request(HttpMethod.POST, ApiBaseUri.GRAPH)
        body: dict[str, Any] = {ParameterName.NAME: graph_name}
        if edge_definitions:
            body[ParameterName.EDGE_DEFINITIONS] = [dict(definition) for definition in edge_definitions]
        if orphan_collections:
            body[ParameterName.ORPHAN_COLLECTIONS] = list(orphan_collections)
        request.set_body(body)
        return self._execute(request, (200, 201, 202))

    @operation
    def get(self, graph_name: str) -> AResult[dict[str, Any]]:
        self._require(graph_name=graph_name)
        request = Request(HttpMethod.GET, ApiBaseUri.GRAPH, path(graph_name))
        return self._execute(request, (200,))

    @operation
    def get_all(self) -> AResult[list[dict[str, Any]]]:
        """List every graph of the current database."""
        request = Request(HttpMethod.GET, ApiBaseUri.GRAPH)
        return self._execute(request, (200,), extract=field("graphs"))

    @operation
    def delete(self, graph_name: str) -> AResult[dict[str, Any]]:
        self._require(graph_name=graph_name)
        request = Request(HttpMethod.DELETE, ApiBaseUri.GRAPH, path(graph_name))
        request.try_set_query_string_parameter(ParameterName.DROP_COLLECTIONS, self._parameters)
        return self._execute(request, (200, 201, 202))

    # vertex collections

    @operation
    def get_vertex_collections(self, graph_name: str) -> AResult[dict[str, Any]]:
        self._require(graph_name=graph_name)
        request = Request(HttpMethod.GET, ApiBaseUri.GRAPH, path(graph_name, "vertex"))
        return self._execute(request, (200,))

    @operation
    def create_vertex_collection(self, graph_name: str, collection_name: str) -> AResult[dict[str, Any]]:
        self._require(graph_name=graph_name, collection_name=collection_name)
        request = Request(HttpMethod.POST, ApiBaseUri.GRAPH, path(graph_name, "vertex"))
        request.set_body({ParameterName.COLLECTION: collection_name})
        return self._execute(request, (200, 201, 202))

    @operation
    def delete_vertex_collection(self, graph_name: str, collection_name: str) -> AResult[dict[str, Any]]:
        self._require(graph_name=graph_name, collection_name=collection_name)
        request = Request(HttpMethod.DELETE, ApiBaseUri.GRAPH, path(graph_name, "vertex", collection_name))
        request.try_set_query_string_parameter(ParameterName.DROP_COLLECTION, self._parameters)
        return self._execute(request, (200, 202))

    # edge definitions

    @operation
    def get_edge_definitions(self, graph_name: str) -> AResult[dict[str, Any]]:
        self._require(graph_name=graph_name)
        request = Request(HttpMethod.GET, ApiBaseUri.GRAPH, path(graph_name, "edge"))
        return self._execute(request, (200,))

    @operation
    def create_edge_definition(
        self,
        graph_name: str,
        definition_name: str,
        from_collections: Sequence[str],
        to_collections: Sequence[str],
    ) -> AResult[dict[str, Any]]:
        self._require(graph_name=graph_name, definition_name=definition_name)
        request = Request(HttpMethod.POST, ApiBaseUri.GRAPH, path(graph_name, "edge"))
        request.set_body(
            {
                ParameterName.COLLECTION: definition_name,
                ParameterName.FROM: list(from_collections),
                ParameterName.TO: list(to_collections),
            }
        )
        return self._execute(request, (200, 201, 202))

    @operation
    def delete_edge_definition(self, graph_name: str, definition_name: str) -> AResult[dict[str, Any]]:
        self._require(graph_name=graph_name, definition_name=definition_name)
        request = Request(HttpMethod.DELETE, ApiBaseUri.GRAPH, path(graph_name, "edge", definition_name))
        request.try_set_query_string_parameter(ParameterName.DROP_COLLECTION, self._parameters)
        return self._execute(request, (200, 202))

    # vertices

    @operation
    def create_vertex(self, graph_name: str, collection_name: str, vertex: Any) -> AResult[dict[str, Any]]:
        """Create a vertex; ``vertex`` may be a mapping, a dataclass, an object or JSON text."""
        return self._create_element("vertex", graph_name, collection_name, vertex)

    @operation
    def get_vertex(
        self,
        graph_name: str,
        collection_name: str,
        key: str,
        model: Callable[..., T] | None = None,
    ) -> AResult[Any]:
        """Fetch a vertex; the value is the vertex document, or ``model`` built from it."""
        return self._get_element("vertex", graph_name, collection_name, key, model)

    @operation
    def update_vertex(
        self, graph_name: str, collection_name: str, key: str, vertex: Any
    ) -> AResult[dict[str, Any]]:
        return self._modify_element(HttpMethod.PATCH, "vertex", graph_name, collection_name, key, vertex)

    @operation
    def replace_vertex(
        self, graph_name: str, collection_name: str, key: str, vertex: Any
    ) -> AResult[dict[str, Any]]:
        return self._modify_element(HttpMethod.PUT, "vertex", graph_name, collection_name, key, vertex)

    @operation
    def delete_vertex(self, graph_name: str, collection_name: str, key: str) -> AResult[dict[str, Any]]:
        return self._delete_element("vertex", graph_name, collection_name, key)

    # edges

    @operation
    def create_edge(
        self,
        graph_name: str,
        collection_name: str,
        from_id: str,
        to_id: str,
        edge: Any | None = None,
    ) -> AResult[dict[str, Any]]:
        """Create an edge between two vertex ids (``collection/key``)."""
        self._require(from_id=from_id, to_id=to_id)
        if isinstance(edge, str):
            try:
                document = json.loads(edge)
            except json.JSONDecodeError as exc:
                raise ArgumentError(f"Edge is not valid JSON: {exc}") from exc
            if not isinstance(document, dict):
                raise ArgumentError("Edge JSON must be an object")
        else:
            document = to_document(edge) if edge is not None else {}
        document["_from"] = from_id
        document["_to"] = to_id
        return self._create_element("edge", graph_name, collection_name, document)

    @operation
    def get_edge(
        self,
        graph_name: str,
        collection_name: str,
        key: str,
        model: Callable[..., T] | None = None,
    ) -> AResult[Any]:
        return self._get_element("edge", graph_name, collection_name, key, model)

    @operation
    def update_edge(self, graph_name: str, collection_name: str, key: str, edge: Any) -> AResult[dict[str, Any]]:
        return self._modify_element(HttpMethod.PATCH, "edge", graph_name, collection_name, key, edge)

    @operation
    def replace_edge(self, graph_name: str, collection_name: str, key: str, edge: Any) -> AResult[dict[str, Any]]:
        return self._modify_element(HttpMethod.PUT, "edge", graph_name, collection_name, key, edge)

    @operation
    def delete_edge(self, graph_name: str, collection_name: str, key: str) -> AResult[dict[str, Any]]:
        return self._delete_element("edge", graph_name, collection_name, key)

    # shared element handling

    def _create_element(self, kind: str, graph_name: str, collection_name: str, element: Any) -> AResult[Any]:
        self._require(graph_name=graph_name, collection_name=collection_name)
        request = Request(HttpMethod.POST, ApiBaseUri.GRAPH, path(graph_name, kind, collection_name))
        request.try_set_query_string_parameter(ParameterName.WAIT_FOR_SYNC, self._parameters)
        request.set_body(element)
        return self._execute(request, (201, 202))

    def _get_element(
        self,
        kind: str,
        graph_name: str,
        collection_name: str,
        key: str,
        model: Callable[..., Any] | None,
    ) -> AResult[Any]:
        self._require(graph_name=graph_name, collection_name=collection_name, key=key)
        request = Request(HttpMethod.GET, ApiBaseUri.GRAPH, path(graph_name, kind, collection_name, key))
        request.try_set_header_parameter(ParameterName.IF_MATCH, self._parameters)
        return self._execute(request, (200,), precondition_value=True, model=model, extract=_unwrap(kind))

    def _modify_element(
        self,
        method: str,
        kind: str,
        graph_name: str,
        collection_name: str,
        key: str,
        element: Any,
    ) -> AResult[Any]:
        self._require(graph_name=graph_name, collection_name=collection_name, key=key)
        request = Request(method, ApiBaseUri.GRAPH, path(graph_name, kind, collection_name, key))
        request.try_set_query_string_parameter(ParameterName.WAIT_FOR_SYNC, self._parameters)
        if method == HttpMethod.PATCH:
            request.try_set_query_string_parameter(ParameterName.KEEP_NULL, self._parameters)
        request.try_set_header_parameter(ParameterName.IF_MATCH, self._parameters)
        request.set_body(element)
        return self._execute(request, (200, 201, 202), precondition_value=True)

    def _delete_element(self, kind: str, graph_name: str, collection_name: str, key: str) -> AResult[Any]:
        self._require(graph_name=graph_name, collection_name=collection_name, key=key)
        request = Request(HttpMethod.DELETE, ApiBaseUri.GRAPH, path(graph_name, kind, collection_name, key))
        request.try_set_query_string_parameter(ParameterName.WAIT_FOR_SYNC, self._parameters)
        request.try_set_header_parameter(ParameterName.IF_MATCH, self._parameters)
        return self._execute(request, (200, 202), precondition_value=True)


__all__ = ["AGraph"]
