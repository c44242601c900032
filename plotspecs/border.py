"""Plot border specifications."""

from __future__ import annotations

from plotspecs.core import DepthOptions, Specs, remove_extra_whitespaces
from plotspecs.lines import LineOptions

__all__ = [
    "DEFAULT_BORDER_LINECOLOR",
    "DEFAULT_BORDER_LINEWIDTH",
    "DEFAULT_BORDER_LINETYPE",
    "BorderSpecs",
]

DEFAULT_BORDER_LINECOLOR = "#404040"
DEFAULT_BORDER_LINEWIDTH = 2
DEFAULT_BORDER_LINETYPE = 1

_BITS = 13


class BorderSpecs(LineOptions, DepthOptions, Specs):
    """Which border edges are drawn, their depth and line options."""

    def __init__(self) -> None:
        super().__init__()
        self._encoding = 0
        self.left()
        self.bottom()
        self.line_type(DEFAULT_BORDER_LINETYPE)
        self.line_width(DEFAULT_BORDER_LINEWIDTH)
        self.line_color(DEFAULT_BORDER_LINECOLOR)
        self.front()

    def _set(self, bit: int) -> "BorderSpecs":
        self._encoding |= 1 << bit
        self._encoding &= (1 << _BITS) - 1
        return self

    def clear(self) -> "BorderSpecs":
        """Remove all border edges."""
        self._encoding = 0
        return self

    def none(self) -> "BorderSpecs":
        """Deactivate all border edges (same as clear)."""
        return self.clear()

    def bottom(self) -> "BorderSpecs":
        """Activate the bottom edge (2D)."""
        return self._set(0)

    def left(self) -> "BorderSpecs":
        """Activate the left edge (2D)."""
        return self._set(1)

    def top(self) -> "BorderSpecs":
        """Activate the top edge (2D)."""
        return self._set(2)

    def right(self) -> "BorderSpecs":
        """Activate the right edge (2D)."""
        return self._set(3)

    def bottom_left_front(self) -> "BorderSpecs":
        """Activate the bottom left-to-front edge (3D)."""
        return self._set(0)

    def bottom_left_back(self) -> "BorderSpecs":
        """Activate the bottom left-to-back edge (3D)."""
        return self._set(1)

    def bottom_right_front(self) -> "BorderSpecs":
        """Activate the bottom right-to-front edge (3D)."""
        return self._set(2)

    def bottom_right_back(self) -> "BorderSpecs":
        """Activate the bottom right-to-back edge (3D)."""
        return self._set(3)

    def left_vertical(self) -> "BorderSpecs":
        """Activate the left vertical edge (3D)."""
        return self._set(4)

    def back_vertical(self) -> "BorderSpecs":
        """Activate the back vertical edge (3D)."""
        return self._set(5)

    def right_vertical(self) -> "BorderSpecs":
        """Activate the right vertical edge (3D)."""
        return self._set(6)

    def front_vertical(self) -> "BorderSpecs":
        """Activate the front vertical edge (3D)."""
        return self._set(7)

    def top_left_back(self) -> "BorderSpecs":
        """Activate the top left-to-back edge (3D)."""
        return self._set(8)

    def top_right_back(self) -> "BorderSpecs":
        """Activate the top right-to-back edge (3D)."""
        return self._set(9)

    def top_left_front(self) -> "BorderSpecs":
        """Activate the top left-to-front edge (3D)."""
        return self._set(10)

    def top_right_front(self) -> "BorderSpecs":
        """Activate the top right-to-front edge (3D)."""
        return self._set(11)

    def polar(self) -> "BorderSpecs":
        """Activate the border for polar plots."""
        return self._set(2)

    def repr(self) -> str:
        return remove_extra_whitespaces(
            f"set border {self._encoding} {self.depth_repr()} {self.line_repr()}"
        )