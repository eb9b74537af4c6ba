"""objkit: rectangle values, a JSON record codec and a CSS selector builder."""

from __future__ import annotations

__version__ = "0.1.0"

from objkit.codec import (  # noqa: E402
    CapabilitySet,
    CodecError,
    EncodeError,
    ParseError,
    Record,
    decode,
    encode,
)
from objkit.config import ObjkitConfig  # noqa: E402
from objkit.selector import (  # noqa: E402
    DuplicateSelectorPartError,
    OutOfOrderSelectorPartError,
    PartKind,
    SelectorBuilder,
    SelectorError,
    SelectorState,
    selector,
    strict_selector,
)
from objkit.shapes import Rectangle, make_rectangle  # noqa: E402

__all__ = [
    "__version__",
    "CapabilitySet",
    "CodecError",
    "DuplicateSelectorPartError",
    "EncodeError",
    "ObjkitConfig",
    "OutOfOrderSelectorPartError",
    "ParseError",
    "PartKind",
    "Record",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "SelectorState",
    "decode",
    "encode",
    "make_rectangle",
    "selector",
    "strict_selector",
]
