"""Names and storage for optional parameters set through fluent builder calls."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ParameterName:
    # query string
    WAIT_FOR_SYNC = "waitForSync"
    KEEP_NULL = "keepNull"
    MERGE_OBJECTS = "mergeObjects"
    RETURN_NEW = "returnNew"
    RETURN_OLD = "returnOld"
    COLLECTION = "collection"
    EXCLUDE_SYSTEM = "excludeSystem"
    DROP_COLLECTION = "dropCollection"
    DROP_COLLECTIONS = "dropCollections"

    # headers
    IF_MATCH = "If-Match"
    IF_NONE_MATCH = "If-None-Match"

    # body attributes
    NAME = "name"
    TYPE = "type"
    FROM = "from"
    TO = "to"
    EDGE_DEFINITIONS = "edgeDefinitions"
    ORPHAN_COLLECTIONS = "orphanCollections"
    JOURNAL_SIZE = "journalSize"
    DO_COMPACT = "doCompact"
    IS_SYSTEM = "isSystem"
    IS_VOLATILE = "isVolatile"
    USERS = "users"


class CollectionType(int, Enum):
    DOCUMENT = 2
    EDGE = 3


class Parameters(dict[str, Any]):
    """Per-resource parameter map, cleared after every operation."""

    def set_bool(self, name: str, value: bool) -> None:
        self[name] = bool(value)

    def set_string(self, name: str, value: str) -> None:
        self[name] = str(value)

    def set_int(self, name: str, value: int) -> None:
        self[name] = int(value)

    def set_enum(self, name: str, value: Enum) -> None:
        self[name] = value.value

    def copy_to(self, document: dict[str, Any], *names: str) -> dict[str, Any]:
        """Copy the named parameters that are present into a request body."""
        for name in names:
            if name in self:
                document[name] = self[name]
        return document


def format_value(value: Any) -> str:
    """Render a parameter the way ArangoDB expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


__all__ = ["CollectionType", "ParameterName", "Parameters", "format_value"]
