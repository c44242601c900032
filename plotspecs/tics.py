"""Tic mark specifications (major and minor) for gnuplot plot axes."""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from plotspecs.core import (
    OffsetOptions,
    ShowOptions,
    Specs,
    TextOptions,
    format_number,
    remove_extra_whitespaces,
)

__all__ = [
    "DEFAULT_TICS_MIRROR",
    "DEFAULT_TICS_ROTATE",
    "DEFAULT_TICS_SCALE_MAJOR_BY",
    "DEFAULT_TICS_SCALE_MINOR_BY",
    "TicsOptions",
    "TicsSpecs",
    "TicsSpecsMajor",
    "TicsSpecsMinor",
]

DEFAULT_TICS_MIRROR = False
DEFAULT_TICS_ROTATE = False
DEFAULT_TICS_SCALE_MAJOR_BY = 0.50
DEFAULT_TICS_SCALE_MINOR_BY = 0.25

_T = TypeVar("_T")


def _tic_list(values: Sequence[float], labels: Optional[Sequence[str]]) -> str:
    """Return a gnuplot tic list such as ``(1, 2)`` or ``('a' 1, 'b' 2)``."""
    if labels is None:
        items = [format_number(v) for v in values]
    else:
        if len(labels) != len(values):
            raise ValueError("values and labels must have the same length")
        items = [f"'{label}' {format_number(v)}" for v, label in zip(values, labels)]
    return "(" + ", ".join(items) + ")"


class TicsOptions(TextOptions, OffsetOptions, ShowOptions):
    """Options shared by all kinds of tics: placement, mirroring, rotation, scale, format."""

    def __init__(self, *args, **kwargs) -> None:
        self._along = ""
        self._mirror = ""
        self._rotate = ""
        self._inout = ""
        self._format = ""
        self._scalemajor = 1.0
        self._scaleminor = 1.0
        self._logscale_base = ""
        super().__init__(*args, **kwargs)
        self.along_border()
        self.mirror(DEFAULT_TICS_MIRROR)
        self.outside_graph()
        self.rotate(DEFAULT_TICS_ROTATE)
        self.scale_major_by(DEFAULT_TICS_SCALE_MAJOR_BY)
        self.scale_minor_by(DEFAULT_TICS_SCALE_MINOR_BY)

    def along_axis(self: _T) -> _T:
        """Display the tics along the axis."""
        self._along = "axis"
        return self

    def along_border(self: _T) -> _T:
        """Display the tics along the border."""
        self._along = "border"
        return self

    def mirror(self: _T, value: bool = True) -> _T:
        """Mirror the tics on the opposite border or not."""
        self._mirror = "mirror" if value else "nomirror"
        return self

    def inside_graph(self: _T) -> _T:
        """Draw the tics inside the graph."""
        self._inout = "in"
        return self

    def outside_graph(self: _T) -> _T:
        """Draw the tics outside the graph."""
        self._inout = "out"
        return self

    def rotate(self: _T, value: bool = True) -> _T:
        """Rotate the tic labels by 90 degrees or not."""
        self._rotate = "rotate" if value else "norotate"
        return self

    def rotate_by(self: _T, degrees: float) -> _T:
        """Rotate the tic labels by the given angle in degrees."""
        self._rotate = f"rotate by {format_number(degrees)}"
        return self

    def scale_by(self: _T, value: float) -> _T:
        """Set the scale of the major tics (same as scale_major_by)."""
        return self.scale_major_by(value)

    def scale_major_by(self: _T, value: float) -> _T:
        """Set the scale of the major tics."""
        self._scalemajor = value
        return self

    def scale_minor_by(self: _T, value: float) -> _T:
        """Set the scale of the minor tics."""
        self._scaleminor = value
        return self

    def format(self: _T, fmt: str) -> _T:
        """Set the format expression of the tic labels (e.g. ``"%.2f"``)."""
        self._format = f"'{fmt}'"
        return self

    def logscale(self: _T, base: int = 10) -> _T:
        """Use a logarithmic scale with the given base for the axis."""
        self._logscale_base = str(int(base))
        return self

    def tics_repr(self, axis: str = "") -> str:
        """Return the tics commands for the given axis (``""`` for all axes)."""
        if self.show_repr() == "no":
            return f"unset {axis}tics"
        prefix = ""
        if self._logscale_base:
            prefix = f"set logscale {axis} {self._logscale_base}\n"
        parts = [
            f"set {axis}tics",
            self._along,
            self._mirror,
            self._inout,
            f"scale {format_number(self._scalemajor)},{format_number(self._scaleminor)}",
            self._rotate,
            self.offset_repr(),
            self.text_repr(),
            self._format,
        ]
        return remove_extra_whitespaces(prefix + " ".join(parts))


class TicsSpecs(TicsOptions, Specs):
    """Tics options applied to all axes, with their depth."""

    def __init__(self) -> None:
        self._depth = ""
        super().__init__()
        self.stack_front()

    def stack_front(self) -> "TicsSpecs":
        """Draw the tics in front of all plot elements."""
        self._depth = "front"
        return self

    def stack_back(self) -> "TicsSpecs":
        """Draw the tics behind all plot elements."""
        self._depth = "back"
        return self

    def repr(self) -> str:
        base = self.tics_repr("")
        if self.is_hidden():
            return base
        return remove_extra_whitespaces(f"{base} {self._depth}")


class TicsSpecsMajor(TicsOptions, Specs):
    """Major tics of one axis, with their positions and labels."""

    def __init__(self, axis: str) -> None:
        if not axis:
            raise ValueError("the axis of major tics must not be empty")
        self._axis = axis
        self._start = ""
        self._increment = ""
        self._end = ""
        self._at = ""
        self._add = ""
        super().__init__()

    def _update_at(self) -> None:
        self._at = self._start + self._increment + self._end

    def automatic(self) -> "TicsSpecsMajor":
        """Let gnuplot choose the tic positions."""
        self._start = ""
        self._end = ""
        self._increment = ""
        self._at = ""
        return self

    def start(self, value: float) -> "TicsSpecsMajor":
        """Set the start value of the tics (an increment must also be set)."""
        self._start = f"{format_number(value)}, "
        self._update_at()
        return self

    def increment(self, value: float) -> "TicsSpecsMajor":
        """Set the increment between tics."""
        self._increment = format_number(value)
        self._update_at()
        return self

    def end(self, value: float) -> "TicsSpecsMajor":
        """Set the end value of the tics (start and increment must also be set)."""
        self._end = f", {format_number(value)}"
        self._update_at()
        return self

    def interval(self, start: float, increment: float, end: float) -> "TicsSpecsMajor":
        """Set the start, increment and end of the tics at once."""
        if increment <= 0.0:
            raise ValueError("the increment of a tics interval must be positive")
        if end <= start:
            raise ValueError("the end of a tics interval must be greater than its start")
        self._at = (
            f"{format_number(start)}, {format_number(increment)}, {format_number(end)}"
        )
        return self

    def at(
        self, values: Sequence[float], labels: Optional[Sequence[str]] = None
    ) -> "TicsSpecsMajor":
        """Place the tics at the given values, optionally with labels."""
        self._at = _tic_list(values, labels)
        return self

    def add(
        self, values: Sequence[float], labels: Optional[Sequence[str]] = None
    ) -> "TicsSpecsMajor":
        """Add extra tics at the given values, optionally with labels."""
        self._add = "add " + _tic_list(values, labels)
        return self

    def repr(self) -> str:
        base = self.tics_repr(self._axis)
        if self.is_hidden():
            return base
        if self._start and not self._increment:
            raise RuntimeError("a tics start was given without an increment")
        if self._end and not self._increment:
            raise RuntimeError("a tics end was given without an increment")
        if self._end and not self._start:
            raise RuntimeError("a tics end was given without a start")
        return remove_extra_whitespaces(f"{base} {self._at} {self._add} ")


class TicsSpecsMinor(ShowOptions, Specs):
    """Minor tics of one axis."""

    def __init__(self, axis: str) -> None:
        if not axis:
            raise ValueError("the axis of minor tics must not be empty")
        self._axis = axis
        self._frequency = ""
        super().__init__()

    def automatic(self) -> "TicsSpecsMinor":
        """Let gnuplot choose the number of minor tics."""
        self._frequency = ""
        return self

    def number(self, value: int) -> "TicsSpecsMinor":
        """Set the number of minor tics between major tics (negative counts as 0)."""
        self._frequency = str(max(int(value), 0) + 1)
        return self

    def repr(self) -> str:
        if self.is_hidden():
            return f"unset m{self._axis}tics"
        return remove_extra_whitespaces(f"set m{self._axis}tics {self._frequency}")