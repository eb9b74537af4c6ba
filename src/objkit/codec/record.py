"""Decoded values: plain field data composed with a set of methods."""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CapabilitySet:
    """A named, read-only table of methods a decoded record exposes.

    Each function takes the record as its first argument, the same way an
    instance method takes ``self``.
    """

    name: str = "Record"
    methods: Mapping[str, Callable[..., Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "methods", types.MappingProxyType(dict(self.methods)))

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self.methods.items())))

    def __reduce__(self):
        return (type(self), (self.name, dict(self.methods)))

    @classmethod
    def from_class(cls, klass: type) -> CapabilitySet:
        """Collect the public functions defined on *klass* and its bases."""
        methods = {
            name: member
            for name, member in inspect.getmembers(klass, inspect.isfunction)
            if not name.startswith("_")
        }
        return cls(name=klass.__name__, methods=methods)

    @classmethod
    def coerce(cls, capabilities: CapabilitySet | type | None) -> CapabilitySet:
        if capabilities is None:
            return cls()
        if isinstance(capabilities, CapabilitySet):
            return capabilities
        if isinstance(capabilities, type):
            return cls.from_class(capabilities)
        raise TypeError(
            f"Expected a CapabilitySet or a class, got {type(capabilities).__name__}"
        )


class Record:
    """Immutable field mapping that also answers to its capability methods.

    Attribute lookup tries the fields first, then the capability set, so
    ``record.radius`` reads a field and ``record.area()`` calls a method
    with the record bound as its first argument.
    """

    __slots__ = ("_fields", "_capabilities")

    def __init__(
        self,
        fields: Mapping[str, Any] | None = None,
        capabilities: CapabilitySet | type | None = None,
    ) -> None:
        object.__setattr__(self, "_fields", dict(fields or {}))
        object.__setattr__(self, "_capabilities", CapabilitySet.coerce(capabilities))

    @property
    def fields(self) -> dict[str, Any]:
        """A copy of the decoded field mapping."""
        return dict(self._fields)

    @property
    def capabilities(self) -> CapabilitySet:
        return self._capabilities

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup (slots, properties) fails.
        fields = object.__getattribute__(self, "_fields")
        if name in fields:
            return fields[name]
        methods = object.__getattribute__(self, "_capabilities").methods
        if name in methods:
            return types.MethodType(methods[name], self)
        raise AttributeError(
            f"{type(self).__name__!s} has no field or method {name!r}"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Record is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Record is immutable; cannot delete {name!r}")

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._fields == other._fields and self._capabilities == other._capabilities

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self):
        return (type(self), (self._fields, self._capabilities))

    def __repr__(self) -> str:
        return f"Record({self._capabilities.name}, fields={self._fields!r})"
