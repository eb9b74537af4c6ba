"""Immutable selector state: fragment accumulation, combination and rendering."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from objkit.selector.errors import DuplicateSelectorPartError, OutOfOrderSelectorPartError
from objkit.selector.kinds import CANONICAL_ORDER, PartKind

logger = logging.getLogger(__name__)

# Dataclass field holding each kind's accumulated fragment.
_FIELDS: dict[PartKind, str] = {
    PartKind.ELEMENT: "element_part",
    PartKind.ID: "id_part",
    PartKind.CLASS: "class_part",
    PartKind.ATTRIBUTE: "attr_part",
    PartKind.PSEUDO_CLASS: "pseudo_class_part",
    PartKind.PSEUDO_ELEMENT: "pseudo_element_part",
}

# Kinds whose presence blocks an append in lenient mode. This matrix is
# intentionally partial: an id after an attribute, or an element after a
# class, is accepted. The id row is the union of two differing historical
# rules (class + pseudo-class, and class + pseudo-element).
_LENIENT_GUARDS: dict[PartKind, tuple[PartKind, ...]] = {
    PartKind.ELEMENT: (PartKind.ID,),
    PartKind.ID: (PartKind.CLASS, PartKind.PSEUDO_CLASS, PartKind.PSEUDO_ELEMENT),
    PartKind.CLASS: (PartKind.ATTRIBUTE,),
    PartKind.ATTRIBUTE: (PartKind.PSEUDO_CLASS,),
    PartKind.PSEUDO_CLASS: (PartKind.PSEUDO_ELEMENT,),
    PartKind.PSEUDO_ELEMENT: (),
}


@dataclass(frozen=True)
class SelectorState:
    """A compound (or combined) CSS selector under construction.

    Every append returns a new state; the receiver is never changed, so a
    state can serve as the common base of several selectors.

    Once ``combined_text`` is set the rendering is fixed for that lineage:
    fragments appended afterwards are recorded but not rendered.
    """

    element_part: str | None = None
    id_part: str | None = None
    class_part: str | None = None
    attr_part: str | None = None
    pseudo_class_part: str | None = None
    pseudo_element_part: str | None = None
    combined_text: str | None = None
    strict: bool = False

    # --- appends --------------------------------------------------------------

    def element(self, value: str) -> SelectorState:
        """Append an element type selector, e.g. ``div``."""
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorState:
        """Append an id selector, rendered ``#value``."""
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorState:
        """Append a class selector, rendered ``.value``."""
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorState:
        """Append an attribute selector, rendered ``[value]``."""
        return self._append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorState:
        """Append a pseudo-class, rendered ``:value``."""
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorState:
        """Append a pseudo-element, rendered ``::value``."""
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    def append(self, kind: PartKind | str, value: str) -> SelectorState:
        """Append a fragment of the given kind.

        *kind* is a PartKind, its value (``"pseudo-class"``) or its name
        (``"PSEUDO_CLASS"``).
        """
        return self._append(PartKind.lookup(kind), value)

    # --- combination ----------------------------------------------------------

    def combine(
        self, left: SelectorState, combinator: str, right: SelectorState
    ) -> SelectorState:
        """Join two selectors with *combinator*: ``"<left> <combinator> <right>"``.

        The combinator is taken verbatim. The result replaces any previous
        combination on this lineage.
        """
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector: %r", text)
        return dataclasses.replace(self, combined_text=text)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector as CSS text."""
        if self.combined_text:
            return self.combined_text
        return "".join(self.parts().values())

    def parts(self) -> dict[PartKind, str]:
        """Return the fragments present, keyed by kind in canonical order."""
        result: dict[PartKind, str] = {}
        for kind in CANONICAL_ORDER:
            fragment = getattr(self, _FIELDS[kind])
            if fragment:
                result[kind] = fragment
        return result

    @property
    def is_combined(self) -> bool:
        return bool(self.combined_text)

    def __str__(self) -> str:
        return self.stringify()

    # --- internals ------------------------------------------------------------

    def _has(self, kind: PartKind) -> bool:
        return bool(getattr(self, _FIELDS[kind]))

    def _check(self, kind: PartKind, value: str) -> None:
        if kind.unique and self._has(kind):
            raise DuplicateSelectorPartError(kind, value)
        guards = kind.later_kinds() if self.strict else _LENIENT_GUARDS[kind]
        for later in guards:
            if self._has(later):
                raise OutOfOrderSelectorPartError(kind, value, conflict=later)

    def _append(self, kind: PartKind, value: str) -> SelectorState:
        self._check(kind, value)
        name = _FIELDS[kind]
        prior = getattr(self, name) or ""
        return dataclasses.replace(self, **{name: prior + kind.render(value)})
