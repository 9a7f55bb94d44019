"""Request and response value objects for one HTTP exchange."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import quote, urlencode

from .documents import serialize
from .parameters import format_value
from .parser import detect_body_type, parse_json_body
from .types import AError, BodyType


class HttpMethod:
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ApiBaseUri:
    COLLECTION = "_api/collection"
    DATABASE = "_api/database"
    DOCUMENT = "_api/document"
    GRAPH = "_api/gharial"
    VERSION = "_api/version"


def path(*segments: str) -> str:
    """Join URL-encoded path segments, each prefixed with a slash."""
    return "".join("/" + quote(str(segment), safe="") for segment in segments)


class Request:
    """One HTTP call: method, resource path, headers, query string and JSON body."""

    def __init__(self, method: str, api_base_uri: str, relative_path: str = "") -> None:
        self.method = method
        self.api_base_uri = api_base_uri
        self.relative_path = relative_path
        self.headers: dict[str, str] = {}
        self.query_string: dict[str, str] = {}
        self.body: str | None = None

    def relative_uri(self) -> str:
        uri = self.api_base_uri + self.relative_path
        if self.query_string:
            uri += "?" + urlencode(self.query_string)
        return uri

    def set_body(self, obj: Any) -> None:
        self.body = serialize(obj)

    def set_query_string_parameter(self, name: str, value: Any) -> None:
        self.query_string[name] = format_value(value)

    def try_set_query_string_parameter(self, name: str, parameters: Mapping[str, Any]) -> bool:
        if name not in parameters:
            return False
        self.set_query_string_parameter(name, parameters[name])
        return True

    def try_set_header_parameter(self, name: str, parameters: Mapping[str, Any]) -> bool:
        if name not in parameters:
            return False
        self.headers[name] = format_value(parameters[name])
        return True

    def __repr__(self) -> str:
        return f"Request({self.method} {self.relative_uri()})"


@dataclass
class Response:
    """Outcome of one HTTP call; ``error`` is set for every non-2xx status."""

    status_code: int = 0
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None
    body_type: BodyType = BodyType.NONE
    error: AError | None = None

    @property
    def is_success_status(self) -> bool:
        return 200 <= self.status_code < 300

    def detect_body_type(self) -> BodyType:
        self.body_type = detect_body_type(self.body)
        return self.body_type

    def parse_body(self) -> Any:
        return parse_json_body(self.body, self.body_type)


__all__ = ["ApiBaseUri", "HttpMethod", "Request", "Response", "path"]
