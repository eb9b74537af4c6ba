"""JSON encoding of record-like values and decoding into Records."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

from objkit.codec.errors import EncodeError, ParseError
from objkit.codec.record import CapabilitySet, Record

__all__ = ["encode", "decode"]

logger = logging.getLogger(__name__)


def _default(value: object) -> Any:
    """Reduce values the json module does not know to their field mapping."""
    if isinstance(value, Record):
        return value.fields
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, (set, frozenset)):
        raise TypeError("sets have no defined order")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Serialise *value* to JSON text.

    Dataclass instances and Records are written as their fields; methods
    are never written. Key order is not part of the output contract.
    """
    try:
        return json.dumps(
            value,
            default=_default,
            allow_nan=False,
            indent=indent,
            sort_keys=sort_keys,
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot encode value: {exc}") from exc


def decode(capabilities: CapabilitySet | type | None, text: str) -> Record:
    """Parse JSON *text* into a Record exposing *capabilities*.

    *capabilities* may be a CapabilitySet, a class whose public methods
    become the record's methods, or None for a bare record.
    """
    caps = CapabilitySet.coerce(capabilities)
    if not isinstance(text, (str, bytes, bytearray)):
        raise ParseError(f"Expected JSON text, got {type(text).__name__}")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid JSON encoding: {exc.reason}") from exc
    except RecursionError as exc:
        raise ParseError("JSON nesting too deep") from exc
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
    logger.debug("Decoded %d field(s) into %s", len(data), caps.name)
    return Record(data, caps)
