"""
Text data models for PDF pages.

These mirror what a PDF engine reports per page: a viewport size and an
ordered list of text items, each carrying its placement transform.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

Transform = Tuple[float, float, float, float, float, float]

IDENTITY: Transform = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


@dataclass(frozen=True)
class TextItem:
    """
    One run of text decoded from a page.

    ``transform`` is the affine matrix ``[a, b, c, d, e, f]`` in PDF space
    (origin bottom-left, y increasing upward).  ``e``/``f`` locate the text
    baseline origin and ``a`` approximates the font size.
    """

    text: str
    transform: Transform = IDENTITY
    font_name: str = ""

    @property
    def x(self) -> float:
        return self.transform[4]

    @property
    def y(self) -> float:
        return self.transform[5]

    @property
    def font_size(self) -> float:
        return self.transform[0]


@dataclass(frozen=True)
class Viewport:
    """Page rectangle at a given scale factor."""

    width: float
    height: float
    scale: float = 1.0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Viewport dimensions must be non-negative, got "
                f"{self.width}x{self.height}"
            )


@dataclass
class TextContent:
    """Ordered text items of a single page."""

    items: List[TextItem] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Item texts joined by a single space, in source order."""
        return " ".join(item.text for item in self.items)
