"""Line, point, filled-curve and frame options for gnuplot specifications."""

from __future__ import annotations

from typing import TypeVar

from plotspecs.core import Specs, format_number, remove_extra_whitespaces

__all__ = [
    "DEFAULT_LEGEND_FRAME_SHOW",
    "DEFAULT_LEGEND_FRAME_LINEWIDTH",
    "DEFAULT_LEGEND_FRAME_LINECOLOR",
    "DEFAULT_LEGEND_FRAME_LINETYPE",
    "LineOptions",
    "LineSpecs",
    "PointOptions",
    "PointSpecs",
    "FilledCurvesOptions",
    "FilledCurvesSpecs",
    "FrameOptions",
    "FrameSpecs",
]

DEFAULT_LEGEND_FRAME_SHOW = True
DEFAULT_LEGEND_FRAME_LINEWIDTH = 2
DEFAULT_LEGEND_FRAME_LINECOLOR = "#d6d7d8"
DEFAULT_LEGEND_FRAME_LINETYPE = 1

_T = TypeVar("_T")


class LineOptions:
    """Line style, type, width, colour and dash type options."""

    def __init__(self, *args, **kwargs) -> None:
        self._linestyle = ""
        self._linetype = ""
        self._linewidth = ""
        self._linecolor = ""
        self._dashtype = ""
        super().__init__(*args, **kwargs)

    def line_style(self: _T, value: int) -> _T:
        """Set the line style index."""
        self._linestyle = f"linestyle {format_number(value)}"
        return self

    def line_type(self: _T, value: int) -> _T:
        """Set the line type index."""
        self._linetype = f"linetype {format_number(value)}"
        return self

    def line_width(self: _T, value: int) -> _T:
        """Set the line width."""
        self._linewidth = f"linewidth {format_number(value)}"
        return self

    def line_color(self: _T, value: str) -> _T:
        """Set the line colour."""
        self._linecolor = f"linecolor '{value}'"
        return self

    def dash_type(self: _T, value: int) -> _T:
        """Set the dash type index."""
        self._dashtype = f"dashtype {format_number(value)}"
        return self

    def line_repr(self) -> str:
        """Return the line options as a gnuplot fragment."""
        return remove_extra_whitespaces(
            " ".join(
                (
                    self._linestyle,
                    self._linetype,
                    self._linewidth,
                    self._linecolor,
                    self._dashtype,
                )
            )
        )


class LineSpecs(LineOptions, Specs):
    """Stand-alone line specifications."""

    def repr(self) -> str:
        return self.line_repr()


class PointOptions:
    """Point type and size options."""

    def __init__(self, *args, **kwargs) -> None:
        self._pointtype = ""
        self._pointsize = ""
        super().__init__(*args, **kwargs)

    def point_type(self: _T, value: int) -> _T:
        """Set the point type index."""
        self._pointtype = f"pointtype {format_number(value)}"
        return self

    def point_size(self: _T, value: int) -> _T:
        """Set the point size."""
        self._pointsize = f"pointsize {format_number(value)}"
        return self

    def point_repr(self) -> str:
        """Return the point options as a gnuplot fragment."""
        return remove_extra_whitespaces(f"{self._pointtype} {self._pointsize}")


class PointSpecs(PointOptions, Specs):
    """Stand-alone point specifications."""

    def repr(self) -> str:
        return self.point_repr()


class FilledCurvesOptions:
    """Options restricting a filled curve to above or below."""

    def __init__(self, *args, **kwargs) -> None:
        self._fill_mode = ""
        super().__init__(*args, **kwargs)

    def above(self: _T) -> _T:
        """Limit the filled area to above the curves."""
        self._fill_mode = "above"
        return self

    def below(self: _T) -> _T:
        """Limit the filled area to below the curves."""
        self._fill_mode = "below"
        return self

    def filled_curves_repr(self) -> str:
        """Return the fill mode keyword, or an empty string."""
        return remove_extra_whitespaces(f" {self._fill_mode}")


class FilledCurvesSpecs(FilledCurvesOptions, Specs):
    """Stand-alone filled-curve specifications."""

    def repr(self) -> str:
        return self.filled_curves_repr()


class FrameOptions:
    """Visibility and line options of a frame (such as the legend box)."""

    def __init__(self, *args, **kwargs) -> None:
        self._frame_show = True
        self._frame_line = LineSpecs()
        super().__init__(*args, **kwargs)
        self.frame_show(DEFAULT_LEGEND_FRAME_SHOW)
        self.frame_line_width(DEFAULT_LEGEND_FRAME_LINEWIDTH)
        self.frame_line_color(DEFAULT_LEGEND_FRAME_LINECOLOR)
        self.frame_line_type(DEFAULT_LEGEND_FRAME_LINETYPE)

    def frame_show(self: _T, value: bool = True) -> _T:
        """Show or hide the frame."""
        self._frame_show = bool(value)
        return self

    def frame_hide(self: _T) -> _T:
        """Hide the frame."""
        return self.frame_show(False)

    def frame_line_style(self: _T, value: int) -> _T:
        """Set the frame line style."""
        self._frame_line.line_style(value)
        return self

    def frame_line_type(self: _T, value: int) -> _T:
        """Set the frame line type."""
        self._frame_line.line_type(value)
        return self

    def frame_line_width(self: _T, value: int) -> _T:
        """Set the frame line width."""
        self._frame_line.line_width(value)
        return self

    def frame_line_color(self: _T, value: str) -> _T:
        """Set the frame line colour."""
        self._frame_line.line_color(value)
        return self

    def frame_dash_type(self: _T, value: int) -> _T:
        """Set the frame dash type."""
        self._frame_line.dash_type(value)
        return self

    def frame_repr(self) -> str:
        """Return ``nobox`` when hidden, otherwise ``box`` with its line options."""
        if not self._frame_show:
            return "nobox"
        return remove_extra_whitespaces(f"box {self._frame_line.repr()}")


class FrameSpecs(FrameOptions, Specs):
    """Stand-alone frame specifications."""

    def repr(self) -> str:
        return self.frame_repr()