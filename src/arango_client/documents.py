"""Conversion between Python objects and ArangoDB JSON documents."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, Mapping, TypeVar

from .errors import ArgumentError, ParseError

T = TypeVar("T")


def to_document(obj: Any) -> dict[str, Any]:
    """Turn a mapping, dataclass instance or plain object into a document dict."""
    if isinstance(obj, Mapping):
        return dict(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return {key: value for key, value in vars(obj).items() if not key.startswith("__")}
    raise ArgumentError(f"Cannot convert {type(obj).__name__} to a document")


def serialize(obj: Any) -> str:
    """Serialize a document-like object; strings are taken as ready JSON."""
    if isinstance(obj, str):
        return obj
    try:
        if isinstance(obj, (list, tuple)):
            return json.dumps([_list_item(item) for item in obj])
        return json.dumps(to_document(obj))
    except TypeError as exc:
        raise ArgumentError(f"Document is not JSON serializable: {exc}") from exc


def from_document(model: type[T] | Callable[..., T], document: Mapping[str, Any]) -> T:
    """Build ``model`` from a document.

    Dataclasses receive only the attributes they declare, so system attributes
    such as ``_key`` or ``_rev`` are dropped unless the dataclass names them.
    Any other callable receives the document as keyword arguments.
    """
    try:
        if isinstance(model, type) and dataclasses.is_dataclass(model):
            names = {f.name for f in dataclasses.fields(model) if f.init}
            return model(**{k: v for k, v in document.items() if k in names})
        return model(**document)
    except TypeError as exc:
        name = getattr(model, "__name__", repr(model))
        raise ParseError(f"Failed to build {name} from document: {exc}", context=document) from exc


def _list_item(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool, list, tuple, dict)):
        return value
    return to_document(value)


__all__ = ["from_document", "serialize", "to_document"]
