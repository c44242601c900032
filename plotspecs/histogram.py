"""Histogram style specifications."""

from __future__ import annotations

from plotspecs.core import Specs, format_number, remove_extra_whitespaces

__all__ = ["HistogramStyleSpecs"]


class HistogramStyleSpecs(Specs):
    """The ``set style histogram`` command."""

    def __init__(self) -> None:
        self._type = ""
        self._gap_clustered = ""
        self._gap_errorbars = ""
        self._linewidth = ""

    def clustered(self) -> "HistogramStyleSpecs":
        """Use clustered histograms."""
        self._type = "clustered"
        return self

    def clustered_with_gap(self, value: float) -> "HistogramStyleSpecs":
        """Use clustered histograms with the given gap size."""
        self._type = "clustered"
        self._gap_clustered = f"gap {format_number(value)}"
        return self

    def row_stacked(self) -> "HistogramStyleSpecs":
        """Stack histograms with groups formed along rows."""
        self._type = "rowstacked"
        return self

    def column_stacked(self) -> "HistogramStyleSpecs":
        """Stack histograms with groups formed along columns."""
        self._type = "columnstacked"
        return self

    def error_bars(self) -> "HistogramStyleSpecs":
        """Use histograms with error bars."""
        self._type = "errorbars"
        return self

    def error_bars_with_gap(self, value: float) -> "HistogramStyleSpecs":
        """Use histograms with error bars and the given gap size."""
        self._type = "errorbars"
        self._gap_errorbars = f"gap {format_number(value)}"
        return self

    def error_bars_with_line_width(self, value: float) -> "HistogramStyleSpecs":
        """Use histograms with error bars of the given line width."""
        self._type = "errorbars"
        self._linewidth = f"linewidth {format_number(value)}"
        return self

    def repr(self) -> str:
        parts = ["set style histogram", self._type]
        if self._type == "clustered":
            parts.append(self._gap_clustered)
        if self._type == "errorbars":
            parts.extend((self._gap_errorbars, self._linewidth))
        return remove_extra_whitespaces(" ".join(parts) + " ")