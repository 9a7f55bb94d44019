"""Public surface for the ArangoDB Python client."""

from .client import ArangoClient, ClientOptions
from .collection import ACollection
from .connection import Connection
from .database import ADatabase
from .document import ADocument
from .errors import (
    ArangoClientError,
    ArangoError,
    ArgumentError,
    ConnectionError,
    ConnectionNotFoundError,
    ParseError,
)
from .graph import AGraph
from .parameters import CollectionType
from .protocol import ApiBaseUri, HttpMethod, Request, Response
from .settings import (
    ConnectionRegistry,
    ConnectionSettings,
    add_connection,
    add_connection_string,
    get_connection,
    has_connection,
    parse_connection_url,
    remove_connection,
)
from .transport import HttpTransport, Transport, TransportResponse
from .types import AError, AResult, BodyType
from .version import __version__

__all__ = [
    "__version__",
    "ACollection",
    "ADatabase",
    "ADocument",
    "AError",
    "AGraph",
    "AResult",
    "ApiBaseUri",
    "ArangoClient",
    "ArangoClientError",
    "ArangoError",
    "ArgumentError",
    "BodyType",
    "ClientOptions",
    "CollectionType",
    "Connection",
    "ConnectionError",
    "ConnectionNotFoundError",
    "ConnectionRegistry",
    "ConnectionSettings",
    "HttpMethod",
    "HttpTransport",
    "ParseError",
    "Request",
    "Response",
    "Transport",
    "TransportResponse",
    "add_connection",
    "add_connection_string",
    "get_connection",
    "has_connection",
    "parse_connection_url",
    "remove_connection",
]
