"""Colour and pattern fill options for gnuplot specifications."""

from __future__ import annotations

from typing import TypeVar

from plotspecs.core import (
    Specs,
    format_number,
    option_value_str,
    remove_extra_whitespaces,
)

__all__ = ["FillOptions", "FillSpecs", "FillStyleSpecs"]

_T = TypeVar("_T")


def _clamp_unit(value: float) -> float:
    """Clamp ``value`` into the closed interval [0, 1]."""
    return min(max(0.0, float(value)), 1.0)


def _border_style(show: str, color: str, width: str) -> str:
    """Return the border part of a fill style, or an empty string if unset."""
    if not show:
        return ""
    if show == "yes":
        return (
            "border "
            + option_value_str("linecolor", color)
            + option_value_str("linewidth", width)
        )
    return "noborder"


class FillOptions:
    """Fill mode, colour, transparency and border options of a plot element."""

    def __init__(self, *args, **kwargs) -> None:
        self._fillmode = ""
        self._fillcolor = ""
        self._transparent = ""
        self._density = ""
        self._pattern_number = ""
        self._bordercolor = ""
        self._borderlinewidth = ""
        self._bordershow = ""
        super().__init__(*args, **kwargs)

    def fill_empty(self: _T) -> _T:
        """Use an empty fill style."""
        self._fillmode = "empty"
        return self

    def fill_solid(self: _T) -> _T:
        """Use a solid fill style."""
        self._fillmode = "solid"
        return self

    def fill_pattern(self: _T, number: int) -> _T:
        """Use a pattern fill style with the given pattern number."""
        self._fillmode = "pattern"
        self._pattern_number = format_number(number)
        return self

    def fill_color(self: _T, color: str) -> _T:
        """Set the colour of the solid or pattern fill."""
        self._fillcolor = f"fillcolor '{color}'"
        return self

    def fill_intensity(self: _T, value: float) -> _T:
        """Set the fill intensity, clamped to [0, 1]; implies a solid fill."""
        self._density = format_number(_clamp_unit(value))
        self._fillmode = "solid"
        return self

    def fill_transparent(self: _T, active: bool = True) -> _T:
        """Make the fill transparent or not; implies a solid fill if none was set."""
        self._transparent = "transparent" if active else ""
        if not self._fillmode:
            self._fillmode = "solid"
        return self

    def border_line_color(self: _T, color: str) -> _T:
        """Set the border line colour."""
        self._bordercolor = f"'{color}'"
        return self

    def border_line_width(self: _T, value: int) -> _T:
        """Set the border line width."""
        self._borderlinewidth = format_number(value)
        return self

    def border_show(self: _T, value: bool = True) -> _T:
        """Show or hide the border."""
        self._bordershow = "yes" if value else "no"
        return self

    def border_hide(self: _T) -> _T:
        """Hide the border."""
        return self.border_show(False)

    def fill_repr(self) -> str:
        """Return the fill options as a gnuplot fragment."""
        if self._fillmode == "solid":
            fillstyle = f"fillstyle {self._transparent} solid {self._density}"
        elif self._fillmode == "pattern":
            fillstyle = f"fillstyle {self._transparent} pattern {self._pattern_number}"
        elif self._fillmode == "empty":
            fillstyle = "fillstyle empty"
        else:
            fillstyle = ""
        borderstyle = _border_style(
            self._bordershow, self._bordercolor, self._borderlinewidth
        )
        return remove_extra_whitespaces(f"{self._fillcolor} {fillstyle} {borderstyle}")


class FillSpecs(FillOptions, Specs):
    """Stand-alone fill specifications."""

    def repr(self) -> str:
        return self.fill_repr()


class FillStyleSpecs(Specs):
    """The global ``set style fill`` command."""

    def __init__(self) -> None:
        self._fillmode = ""
        self._transparent = ""
        self._density = ""
        self._pattern_number = ""
        self._bordercolor = ""
        self._borderlinewidth = ""
        self._bordershow = ""

    def empty(self) -> "FillStyleSpecs":
        """Use an empty fill style."""
        self._fillmode = "empty"
        return self

    def solid(self) -> "FillStyleSpecs":
        """Use a solid fill style."""
        self._fillmode = "solid"
        return self

    def pattern(self, number: int) -> "FillStyleSpecs":
        """Use a pattern fill style with the given pattern number."""
        self._fillmode = "pattern"
        self._pattern_number = format_number(number)
        return self

    def intensity(self, value: float) -> "FillStyleSpecs":
        """Set the fill intensity, clamped to [0, 1]; implies a solid fill."""
        self._density = format_number(_clamp_unit(value))
        self._fillmode = "solid"
        return self

    def transparent(self, active: bool = True) -> "FillStyleSpecs":
        """Make the fill transparent or not; implies a solid fill if none was set."""
        self._transparent = "transparent" if active else ""
        if not self._fillmode:
            self._fillmode = "solid"
        return self

    def border_line_color(self, color: str) -> "FillStyleSpecs":
        """Set the border line colour."""
        self._bordercolor = f"'{color}'"
        return self

    def border_line_width(self, value: int) -> "FillStyleSpecs":
        """Set the border line width."""
        self._borderlinewidth = format_number(value)
        return self

    def border_show(self, value: bool = True) -> "FillStyleSpecs":
        """Show or hide the border."""
        self._bordershow = "yes" if value else "no"
        return self

    def border_hide(self) -> "FillStyleSpecs":
        """Hide the border."""
        return self.border_show(False)

    def repr(self) -> str:
        if self._fillmode == "solid":
            fillstyle = f"{self._transparent} solid {self._density}"
        elif self._fillmode == "pattern":
            fillstyle = f"{self._transparent} pattern {self._pattern_number}"
        elif self._fillmode == "empty":
            fillstyle = "empty"
        else:
            fillstyle = ""
        borderstyle = _border_style(
            self._bordershow, self._bordercolor, self._borderlinewidth
        )
        if not fillstyle and not borderstyle:
            return ""
        return remove_extra_whitespaces(f"set style fill {fillstyle} {borderstyle}")