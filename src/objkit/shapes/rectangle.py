"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass

Number = int | float


@dataclass(frozen=True)
class Rectangle:
    """An immutable width/height pair."""

    width: Number
    height: Number

    def get_area(self) -> Number:
        """Return ``width * height``, computed on every call."""
        return self.width * self.height


def make_rectangle(width: Number, height: Number) -> Rectangle:
    """Create a Rectangle. No range validation is applied."""
    return Rectangle(width=width, height=height)
