"""Axis label and title specifications for gnuplot."""

from __future__ import annotations

from typing import TypeVar

from plotspecs.core import (
    OffsetSpecs,
    Specs,
    TextOptions,
    TextSpecs,
    option_str,
    remove_extra_whitespaces,
)

__all__ = ["AxisLabelSpecs", "TitleOptions", "TitleSpecs"]

_T = TypeVar("_T")


class AxisLabelSpecs(TextOptions, Specs):
    """Label of an axis (e.g. xlabel, ylabel)."""

    def __init__(self, axis: str) -> None:
        super().__init__()
        self._axis = axis
        self._text = ""
        self._rotate = ""

    def text(self, text: str) -> "AxisLabelSpecs":
        """Set the label text."""
        self._text = f"'{text}'"
        return self

    def rotate_by(self, degrees: int) -> "AxisLabelSpecs":
        """Rotate the label by the given angle in degrees."""
        self._rotate = f"rotate by {int(degrees)}"
        return self

    def rotate_axis_parallel(self) -> "AxisLabelSpecs":
        """Rotate the label to run parallel to its axis (3D plots)."""
        self._rotate = "rotate parallel"
        return self

    def rotate_none(self) -> "AxisLabelSpecs":
        """Do not rotate the label."""
        self._rotate = "norotate"
        return self

    def repr(self) -> str:
        if not self._text and not self._rotate:
            return ""
        return remove_extra_whitespaces(
            f"set {self._axis}label {self._text} {self.text_repr()} "
            + option_str(self._rotate)
        )


class TitleOptions:
    """Title text with its own text and offset options."""

    def __init__(self, *args, **kwargs) -> None:
        self._title = "''"
        self._title_text = TextSpecs()
        self._title_offset = OffsetSpecs()
        super().__init__(*args, **kwargs)

    def title(self: _T, title: str) -> _T:
        """Set the title text."""
        self._title = f"'{title}'"
        return self

    def title_shift_along_x(self: _T, chars: float) -> _T:
        """Shift the title along x by a number of characters."""
        self._title_offset.shift_along_x(chars)
        return self

    def title_shift_along_y(self: _T, chars: float) -> _T:
        """Shift the title along y by a number of characters."""
        self._title_offset.shift_along_y(chars)
        return self

    def title_shift_along_graph_x(self: _T, val: float) -> _T:
        """Shift the title along x in graph coordinates."""
        self._title_offset.shift_along_graph_x(val)
        return self

    def title_shift_along_graph_y(self: _T, val: float) -> _T:
        """Shift the title along y in graph coordinates."""
        self._title_offset.shift_along_graph_y(val)
        return self

    def title_shift_along_screen_x(self: _T, val: float) -> _T:
        """Shift the title along x in screen coordinates."""
        self._title_offset.shift_along_screen_x(val)
        return self

    def title_shift_along_screen_y(self: _T, val: float) -> _T:
        """Shift the title along y in screen coordinates."""
        self._title_offset.shift_along_screen_y(val)
        return self

    def title_text_color(self: _T, color: str) -> _T:
        """Set the colour of the title text."""
        self._title_text.text_color(color)
        return self

    def title_font_name(self: _T, name: str) -> _T:
        """Set the font name of the title text."""
        self._title_text.font_name(name)
        return self

    def title_font_size(self: _T, size: int) -> _T:
        """Set the font point size of the title text."""
        self._title_text.font_size(size)
        return self

    def title_repr(self) -> str:
        """Return the title fragment, or an empty string if the title is empty."""
        if self._title == "''":
            return ""
        return remove_extra_whitespaces(
            f"title {self._title} {self._title_text.repr()} {self._title_offset.repr()}"
        )


class TitleSpecs(TitleOptions, Specs):
    """Stand-alone title specifications."""

    def repr(self) -> str:
        return self.title_repr()