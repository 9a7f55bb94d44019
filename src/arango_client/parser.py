"""Response body helpers: type detection, JSON decoding and error extraction."""

from __future__ import annotations

import json
from typing import Any

from .errors import ParseError
from .types import AError, BodyType


def detect_body_type(body: str | None) -> BodyType:
    text = (body or "").strip()
    if not text:
        return BodyType.NONE
    if text.startswith("{"):
        return BodyType.DOCUMENT
    if text.startswith("["):
        return BodyType.LIST
    return BodyType.TEXT


def parse_json_body(body: str | None, body_type: BodyType | None = None) -> Any:
    """Decode a JSON document or list; empty and plain-text bodies yield None."""
    kind = body_type or detect_body_type(body)
    if kind not in (BodyType.DOCUMENT, BodyType.LIST):
        return None
    try:
        return json.loads(body or "")
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON response: {exc}", context=body) from exc


def extract_arango_error(body: str | None, body_type: BodyType | None = None) -> AError | None:
    """Build an ArangoDB error from a structured ``{"error": true, ...}`` body."""
    if (body_type or detect_body_type(body)) is not BodyType.DOCUMENT:
        return None
    try:
        parsed = parse_json_body(body, BodyType.DOCUMENT)
    except ParseError:
        return None

    if not isinstance(parsed, dict) or parsed.get("error") is not True:
        return None

    message = parsed.get("errorMessage")
    return AError.arango(
        status_code=_as_int(parsed.get("code")),
        number=_as_int(parsed.get("errorNum")),
        message=message if isinstance(message, str) else str(message or ""),
    )


def decode_body(body: bytes | None) -> str:
    return (body or b"").decode("utf-8", errors="replace")


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


__all__ = ["decode_body", "detect_body_type", "extract_arango_error", "parse_json_body"]
