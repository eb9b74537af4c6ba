"""Entry-point facade for building CSS selectors.

Example::

    selector.id("main").class_("container").class_("editable").stringify()
    # => '#main.container.editable'

    selector.combine(
        selector.element("div").id("main"),
        "+",
        selector.element("span"),
    ).stringify()
    # => 'div#main + span'
"""

from __future__ import annotations

from objkit.selector.kinds import PartKind
from objkit.selector.model import SelectorState

__all__ = ["SelectorBuilder", "selector", "strict_selector"]

COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


class SelectorBuilder:
    """Starts every selector chain from a fresh, empty state."""

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def empty(self) -> SelectorState:
        return SelectorState(strict=self.strict)

    def element(self, value: str) -> SelectorState:
        return self.empty().element(value)

    def id(self, value: str) -> SelectorState:
        return self.empty().id(value)

    def class_(self, value: str) -> SelectorState:
        return self.empty().class_(value)

    def attr(self, value: str) -> SelectorState:
        return self.empty().attr(value)

    def pseudo_class(self, value: str) -> SelectorState:
        return self.empty().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorState:
        return self.empty().pseudo_element(value)

    def append(self, kind: PartKind | str, value: str) -> SelectorState:
        return self.empty().append(kind, value)

    def combine(
        self, left: SelectorState, combinator: str, right: SelectorState
    ) -> SelectorState:
        """Join two built selectors; see :meth:`SelectorState.combine`."""
        return self.empty().combine(left, combinator, right)

    def __repr__(self) -> str:
        return f"SelectorBuilder(strict={self.strict})"


selector = SelectorBuilder()
strict_selector = SelectorBuilder(strict=True)
