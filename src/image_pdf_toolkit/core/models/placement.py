"""
Module: placement

Purpose:
    Provides the Placement dataclass - position and size of one image on
    one page, in millimetres.

Key Classes:
    - Placement: Image rectangle measured from the page's top-left corner

Dependencies:
    - dataclasses (std)

Used By:
    - converter.layout.placement: compute_placement()
    - converter.output.renderer: Drawing images onto pages
"""

from __future__ import annotations

from dataclasses import dataclass


# Rounding tolerance for bounds checks (mm)
DEFAULT_TOLERANCE_MM = 1e-6


@dataclass(frozen=True, slots=True)
class Placement:
    """
    Image rectangle on a page, in millimetres.

    Coordinates are relative to the page's top-left corner: x grows to the
    right, y grows downwards.

    Attributes:
        width: Placed width (mm)
        height: Placed height (mm)
        x: Offset of the left edge from the page's left edge (mm)
        y: Offset of the top edge from the page's top edge (mm)

    Example:
        >>> p = Placement(width=210.0, height=157.5, x=0.0, y=69.75)
        >>> p.bottom
        227.25
        >>> p.fits_within(210, 297)
        True
    """

    width: float
    height: float
    x: float
    y: float

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if self.width < 0:
            raise ValueError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0: {self.height}")

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge measured from the page top (y + height)."""
        return self.y + self.height

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height (0.0 for a zero-height placement)."""
        if self.height == 0:
            return 0.0
        return self.width / self.height

    def fits_within(
        self,
        page_width: float,
        page_height: float,
        tolerance: float = DEFAULT_TOLERANCE_MM,
    ) -> bool:
        """Check the rectangle lies inside a page of the given size."""
        return (
            self.x >= -tolerance
            and self.y >= -tolerance
            and self.right <= page_width + tolerance
            and self.bottom <= page_height + tolerance
        )
