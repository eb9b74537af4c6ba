from objkit.selector.builder import COMBINATORS, SelectorBuilder, selector, strict_selector
from objkit.selector.errors import (
    DuplicateSelectorPartError,
    OutOfOrderSelectorPartError,
    SelectorError,
)
from objkit.selector.kinds import CANONICAL_ORDER, PartKind
from objkit.selector.model import SelectorState

__all__ = [
    "CANONICAL_ORDER",
    "COMBINATORS",
    "DuplicateSelectorPartError",
    "OutOfOrderSelectorPartError",
    "PartKind",
    "SelectorBuilder",
    "SelectorError",
    "SelectorState",
    "selector",
    "strict_selector",
]
