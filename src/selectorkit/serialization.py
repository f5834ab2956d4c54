"""JSON helpers: encode objects to compact JSON and bind parsed JSON to a type."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import ParseError, SerializationError

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

_COMPACT_SEPARATORS = (",", ":")


def _encode_object(obj: Any) -> Any:
    """Fallback encoder for values the json module does not know about.

    Dataclasses are encoded by field in definition order; other objects by
    their instance attributes in assignment order.  Callable attributes are
    dropped; any other callable cannot be encoded.
    """
    if callable(obj):
        raise TypeError(f"Callable {obj!r} is not JSON serializable")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not callable(v)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(value: Any, config: SelectorKitConfig | None = None) -> str:
    """Return the JSON representation of *value*.

    Output is compact (``[1,2,3]``, ``{"width":10,"height":20}``) unless
    ``config.indent`` is set.  Key order follows the object's own field
    order; pass ``config.sort_keys`` to sort instead.

    Raises:
        SerializationError: If *value* holds something JSON cannot express,
            such as a set, a circular reference, or a non-finite float.
    """
    config = config or SelectorKitConfig()
    separators = _COMPACT_SEPARATORS if config.indent is None else (",", ": ")
    try:
        return json.dumps(
            value,
            indent=config.indent,
            sort_keys=config.sort_keys,
            separators=separators,
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_object,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode value as JSON: {exc}", cause=exc) from exc


def from_json(proto: type, text: str | bytes) -> Any:
    """Parse *text* and return the result as an instance of *proto*.

    A JSON object is bound to *proto* by creating an instance without calling
    its ``__init__`` and copying the object's keys onto it as attributes, so
    the class's methods and properties work on the result::

        from_json(Rectangle, '{"width":10,"height":20}').area  # 200

    A parsed value that is already an instance of *proto* (``dict``,
    ``list``, ``str`` and so on) is returned unchanged.

    Raises:
        ParseError: If *text* is not well-formed JSON.
        SerializationError: If *proto* is missing, or the parsed value cannot
            be bound to it.
    """
    if proto is None:
        raise SerializationError("A prototype type is required to bind parsed JSON")
    if not isinstance(proto, type):
        raise SerializationError(f"Prototype must be a type, got {proto!r}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid JSON encoding: {exc.reason}", cause=exc) from exc

    return _bind(proto, data)


def _bind(proto: type, data: Any) -> Any:
    if isinstance(data, proto):
        return data
    if not isinstance(data, dict):
        raise SerializationError(
            f"Cannot bind JSON {type(data).__name__} to {proto.__name__}"
        )

    try:
        obj = proto.__new__(proto)
        # Bypasses __setattr__ so frozen dataclasses can be bound too.
        vars(obj).update(data)
    except TypeError as exc:
        raise SerializationError(
            f"Cannot bind JSON object to {proto.__name__}: {exc}", cause=exc
        ) from exc

    logger.debug("Bound JSON object with keys %s to %s", list(data), proto.__name__)
    return obj
