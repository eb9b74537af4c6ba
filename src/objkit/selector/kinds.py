"""Selector part kinds in canonical CSS order."""

from __future__ import annotations

from enum import StrEnum


class PartKind(StrEnum):
    """One kind of fragment inside a compound selector.

    Members are declared in canonical order:
        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def unique(self) -> bool:
        """True if the kind may occur at most once per compound selector."""
        return self in _UNIQUE

    @property
    def position(self) -> int:
        return CANONICAL_ORDER.index(self)

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's syntactic marker."""
        prefix, suffix = _MARKERS[self]
        return f"{prefix}{value}{suffix}"

    def later_kinds(self) -> tuple[PartKind, ...]:
        """All kinds that must come after this one."""
        return CANONICAL_ORDER[self.position + 1 :]

    @classmethod
    def lookup(cls, key: PartKind | str) -> PartKind:
        """Resolve a member from itself, its value or its name."""
        try:
            return cls(key)
        except ValueError:
            pass
        try:
            return cls[str(key)]
        except KeyError:
            raise ValueError(f"Unknown selector part kind: {key!r}") from None


CANONICAL_ORDER: tuple[PartKind, ...] = tuple(PartKind)

_UNIQUE = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_MARKERS: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}
