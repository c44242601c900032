"""Shared helpers and the basic option mixins for gnuplot specification strings."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TypeVar

__all__ = [
    "DEFAULT_TEXTCOLOR",
    "remove_extra_whitespaces",
    "option_str",
    "option_value_str",
    "format_number",
    "Specs",
    "ShowOptions",
    "ShowSpecs",
    "DepthOptions",
    "DepthSpecs",
    "FontOptions",
    "FontSpecs",
    "TextOptions",
    "TextSpecs",
    "OffsetOptions",
    "OffsetSpecs",
]

DEFAULT_TEXTCOLOR = "#404040"

_T = TypeVar("_T")
_SPACE_RUN = re.compile(r" {2,}")


def remove_extra_whitespaces(text: str) -> str:
    """Collapse runs of spaces into one and trim whitespace at both ends."""
    return _SPACE_RUN.sub(" ", text).strip()


def option_str(value: str) -> str:
    """Return ``value`` followed by a space, or an empty string if it is empty."""
    return f"{value} " if value else ""


def option_value_str(option: str, value: str) -> str:
    """Return ``"option value "``, or an empty string if ``value`` is empty."""
    return f"{option} {value} " if value else ""


def format_number(value: float) -> str:
    """Format a number the way gnuplot commands expect it (at most 6 significant digits)."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


class Specs(ABC):
    """Base for every object that renders itself as a gnuplot command fragment."""

    @abstractmethod
    def repr(self) -> str:
        """Return the gnuplot formatted string of these specifications."""

    def __str__(self) -> str:
        return self.repr()


class ShowOptions:
    """Visibility option of a plot element."""

    def __init__(self, *args, **kwargs) -> None:
        self._show = True
        super().__init__(*args, **kwargs)

    def show(self: _T, value: bool = True) -> _T:
        """Set whether the plot element is visible."""
        self._show = bool(value)
        return self

    def hide(self: _T) -> _T:
        """Hide the plot element."""
        return self.show(False)

    def is_hidden(self) -> bool:
        """Return True if the plot element is hidden."""
        return not self._show

    def show_repr(self) -> str:
        """Return ``"no"`` when hidden, otherwise an empty string."""
        return "" if self._show else "no"


class ShowSpecs(ShowOptions, Specs):
    """Stand-alone visibility specifications."""

    def repr(self) -> str:
        return self.show_repr()


class DepthOptions:
    """Depth placement (front, back, behind) of a plot element."""

    def __init__(self, *args, **kwargs) -> None:
        self._depth = "back"
        super().__init__(*args, **kwargs)

    def front(self: _T) -> _T:
        """Draw the element in front of all other plot elements."""
        self._depth = "front"
        return self

    def back(self: _T) -> _T:
        """Draw the element at the back of all other plot elements."""
        self._depth = "back"
        return self

    def behind(self: _T) -> _T:
        """Draw the element behind all other plot elements."""
        self._depth = "behind"
        return self

    def depth_repr(self) -> str:
        """Return the depth keyword."""
        return self._depth


class DepthSpecs(DepthOptions, Specs):
    """Stand-alone depth specifications."""

    def repr(self) -> str:
        return self.depth_repr()


class FontOptions:
    """Font name and size options."""

    def __init__(self, *args, **kwargs) -> None:
        self._fontname = ""
        self._fontsize = ""
        super().__init__(*args, **kwargs)

    def font_name(self: _T, name: str) -> _T:
        """Set the font name (e.g. Helvetica, Georgia, Times)."""
        self._fontname = name
        return self

    def font_size(self: _T, size: int) -> _T:
        """Set the font point size."""
        if size < 0:
            raise ValueError("font size must not be negative")
        self._fontsize = str(int(size))
        return self

    def font_repr(self) -> str:
        """Return the ``font 'name,size'`` fragment, or an empty string."""
        if self._fontname or self._fontsize:
            return f"font '{self._fontname},{self._fontsize}'"
        return ""


class FontSpecs(FontOptions, Specs):
    """Stand-alone font specifications."""

    def repr(self) -> str:
        return self.font_repr()


class TextOptions(FontOptions):
    """Text colour, enhanced mode and font options."""

    def __init__(self, *args, **kwargs) -> None:
        self._color = ""
        self._enhanced = ""
        super().__init__(*args, **kwargs)
        self.enhanced(True)
        self.text_color(DEFAULT_TEXTCOLOR)

    def text_color(self: _T, color: str) -> _T:
        """Set the text colour (e.g. ``"blue"``, ``"#404040"``)."""
        self._color = f"'{color}'"
        return self

    def enhanced(self: _T, value: bool = True) -> _T:
        """Enable or disable gnuplot's enhanced text mode."""
        self._enhanced = "enhanced" if value else "noenhanced"
        return self

    def text_repr(self) -> str:
        """Return the text options as a gnuplot fragment."""
        return remove_extra_whitespaces(
            f"{self._enhanced} textcolor {self._color} {self.font_repr()}"
        )


class TextSpecs(TextOptions, Specs):
    """Stand-alone text specifications."""

    def repr(self) -> str:
        return self.text_repr()


class OffsetOptions:
    """Offset of a plot element in character, graph or screen coordinates."""

    def __init__(self, *args, **kwargs) -> None:
        self._xoffset = "0"
        self._yoffset = "0"
        super().__init__(*args, **kwargs)

    def shift_along_x(self: _T, chars: float) -> _T:
        """Shift along x by a number of characters."""
        self._xoffset = format_number(chars)
        return self

    def shift_along_y(self: _T, chars: float) -> _T:
        """Shift along y by a number of characters."""
        self._yoffset = format_number(chars)
        return self

    def shift_along_graph_x(self: _T, val: float) -> _T:
        """Shift along x in graph coordinates."""
        self._xoffset = f"graph {format_number(val)}"
        return self

    def shift_along_graph_y(self: _T, val: float) -> _T:
        """Shift along y in graph coordinates."""
        self._yoffset = f"graph {format_number(val)}"
        return self

    def shift_along_screen_x(self: _T, val: float) -> _T:
        """Shift along x in screen coordinates."""
        self._xoffset = f"screen {format_number(val)}"
        return self

    def shift_along_screen_y(self: _T, val: float) -> _T:
        """Shift along y in screen coordinates."""
        self._yoffset = f"screen {format_number(val)}"
        return self

    def offset_repr(self) -> str:
        """Return the ``offset x, y`` fragment, or an empty string if unshifted."""
        offset = ""
        if self._xoffset != "0" or self._yoffset != "0":
            offset = f"offset {self._xoffset}, {self._yoffset}"
        return remove_extra_whitespaces(option_str(offset))


class OffsetSpecs(OffsetOptions, Specs):
    """Stand-alone offset specifications."""

    def repr(self) -> str:
        return self.offset_repr()