"""Selector builder error types."""

from __future__ import annotations

from objkit.selector.kinds import PartKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base error for an invalid selector append."""

    def __init__(self, message: str, kind: PartKind, value: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value


class DuplicateSelectorPartError(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: PartKind, value: str) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind, value)


class OutOfOrderSelectorPartError(SelectorError):
    """Raised when a part is appended after a part that must follow it."""

    def __init__(self, kind: PartKind, value: str, conflict: PartKind) -> None:
        super().__init__(ORDER_MESSAGE, kind, value)
        self.conflict = conflict
