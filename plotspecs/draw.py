"""Specifications of a single plotted element (a function or a data series)."""

from __future__ import annotations

from typing import Optional, Union

from plotspecs.core import Specs, option_value_str, remove_extra_whitespaces
from plotspecs.fill import FillOptions
from plotspecs.lines import FilledCurvesOptions, LineOptions, PointOptions

__all__ = ["DEFAULT_LINEWIDTH", "DrawSpecs"]

DEFAULT_LINEWIDTH = 2


def _column_value(icol: Union[int, str]) -> str:
    """Return a column reference: a number, or a quoted column name."""
    if isinstance(icol, bool):
        raise TypeError("column index must be an int or a str")
    if isinstance(icol, int):
        return str(icol)
    if isinstance(icol, str):
        return f"'{icol}'"
    raise TypeError("column index must be an int or a str")


class DrawSpecs(LineOptions, PointOptions, FillOptions, FilledCurvesOptions, Specs):
    """Options of a plotted element: what is drawn, how, and its legend label."""

    def __init__(self, what: str, use: str, with_: str) -> None:
        super().__init__()
        self._what = what
        self._using = use
        self._with = with_
        self._title = ""
        self._xtic = ""
        self._ytic = ""
        self.line_width(DEFAULT_LINEWIDTH)

    def label(self, text: str) -> "DrawSpecs":
        """Set the legend label."""
        self._title = f"title '{text}'"
        return self

    def label_from_column_header(self, icolumn: Optional[int] = None) -> "DrawSpecs":
        """Take the legend label from a column header, optionally of a given column."""
        if icolumn is None:
            self._title = "title columnheader"
        else:
            self._title = f"title columnheader({int(icolumn)})"
        return self

    def label_none(self) -> "DrawSpecs":
        """Leave the element out of the legend."""
        self._title = "notitle"
        return self

    def label_default(self) -> "DrawSpecs":
        """Let gnuplot derive the legend label from the plot expression."""
        self._title = ""
        return self

    def xtics(self, icol: Union[int, str]) -> "DrawSpecs":
        """Take the x tic labels from a data column (index or name)."""
        self._xtic = f"xtic(stringcolumn({_column_value(icol)}))"
        return self

    def ytics(self, icol: Union[int, str]) -> "DrawSpecs":
        """Take the y tic labels from a data column (index or name)."""
        self._ytic = f"ytic(stringcolumn({_column_value(icol)}))"
        return self

    def repr(self) -> str:
        use = self._using
        if self._xtic:
            use += ":" + self._xtic
        if self._ytic:
            use += ":" + self._ytic
        parts = [
            f"{self._what} ",
            option_value_str("using", use),
            f"{self._title} ",
            option_value_str("with", self._with),
            f"{self.filled_curves_repr()} ",
            f"{self.line_repr()} ",
            f"{self.point_repr()} ",
            f"{self.fill_repr()} ",
        ]
        return remove_extra_whitespaces("".join(parts))