"""Legend (key) specifications for gnuplot plots."""

from __future__ import annotations

from plotspecs.core import ShowOptions, Specs, TextOptions, remove_extra_whitespaces
from plotspecs.labels import TitleOptions
from plotspecs.lines import FrameOptions

__all__ = [
    "DEFAULT_LEGEND_FRAME_EXTRA_WIDTH",
    "DEFAULT_LEGEND_FRAME_EXTRA_HEIGHT",
    "DEFAULT_LEGEND_SAMPLE_LENGTH",
    "DEFAULT_LEGEND_SPACING",
    "LegendSpecs",
]

DEFAULT_LEGEND_FRAME_EXTRA_WIDTH = 0
DEFAULT_LEGEND_FRAME_EXTRA_HEIGHT = 0
DEFAULT_LEGEND_SAMPLE_LENGTH = 2
DEFAULT_LEGEND_SPACING = 1


class LegendSpecs(TextOptions, ShowOptions, TitleOptions, FrameOptions, Specs):
    """Placement, layout, title and frame of the plot legend."""

    def __init__(self) -> None:
        self._placement = ""
        self._opaque = ""
        self._alignment = ""
        self._reverse = ""
        self._invert = ""
        self._justification = ""
        self._title_loc = "left"
        self._width_increment = 0
        self._height_increment = 0
        self._samplen = 0
        self._spacing = 0
        self._maxrows = "auto"
        self._maxcols = "auto"
        super().__init__()
        self.at_top_right()
        self.title("")
        self.display_expand_width_by(DEFAULT_LEGEND_FRAME_EXTRA_WIDTH)
        self.display_expand_height_by(DEFAULT_LEGEND_FRAME_EXTRA_HEIGHT)
        self.display_symbol_length(DEFAULT_LEGEND_SAMPLE_LENGTH)
        self.display_spacing(DEFAULT_LEGEND_SPACING)
        self.display_vertical()
        self.display_labels_after_symbols()
        self.display_justify_left()
        self.display_start_from_first()
        self.opaque()

    def _place(self, placement: str) -> "LegendSpecs":
        self._placement = placement
        return self

    def opaque(self) -> "LegendSpecs":
        """Give the legend box an opaque background."""
        self._opaque = "opaque"
        return self

    def transparent(self) -> "LegendSpecs":
        """Give the legend box a transparent background."""
        self._opaque = "noopaque"
        return self

    def at_left(self) -> "LegendSpecs":
        """Place inside the plot at its left side."""
        return self._place("inside left")

    def at_right(self) -> "LegendSpecs":
        """Place inside the plot at its right side."""
        return self._place("inside right")

    def at_center(self) -> "LegendSpecs":
        """Place inside the plot at its center."""
        return self._place("inside center")

    def at_top(self) -> "LegendSpecs":
        """Place inside the plot at its top side."""
        return self._place("inside center top")

    def at_top_left(self) -> "LegendSpecs":
        """Place inside the plot at its top-left corner."""
        return self._place("inside left top")

    def at_top_right(self) -> "LegendSpecs":
        """Place inside the plot at its top-right corner."""
        return self._place("inside right top")

    def at_bottom(self) -> "LegendSpecs":
        """Place inside the plot at its bottom side."""
        return self._place("inside center bottom")

    def at_bottom_left(self) -> "LegendSpecs":
        """Place inside the plot at its bottom-left corner."""
        return self._place("inside left bottom")

    def at_bottom_right(self) -> "LegendSpecs":
        """Place inside the plot at its bottom-right corner."""
        return self._place("inside right bottom")

    def at_outside_left(self) -> "LegendSpecs":
        """Place outside the plot at its left side."""
        return self._place("lmargin center")

    def at_outside_left_top(self) -> "LegendSpecs":
        """Place outside the plot at its left-top corner."""
        return self._place("lmargin top")

    def at_outside_left_bottom(self) -> "LegendSpecs":
        """Place outside the plot at its left-bottom corner."""
        return self._place("lmargin bottom")

    def at_outside_right(self) -> "LegendSpecs":
        """Place outside the plot at its right side."""
        return self._place("rmargin center")

    def at_outside_right_top(self) -> "LegendSpecs":
        """Place outside the plot at its right-top corner."""
        return self._place("rmargin top")

    def at_outside_right_bottom(self) -> "LegendSpecs":
        """Place outside the plot at its right-bottom corner."""
        return self._place("rmargin bottom")

    def at_outside_bottom(self) -> "LegendSpecs":
        """Place outside the plot at its bottom side."""
        return self._place("bmargin center")

    def at_outside_bottom_left(self) -> "LegendSpecs":
        """Place outside the plot at its bottom-left corner."""
        return self._place("bmargin left")

    def at_outside_bottom_right(self) -> "LegendSpecs":
        """Place outside the plot at its bottom-right corner."""
        return self._place("bmargin right")

    def at_outside_top(self) -> "LegendSpecs":
        """Place outside the plot at its top side."""
        return self._place("tmargin center")

    def at_outside_top_left(self) -> "LegendSpecs":
        """Place outside the plot at its top-left corner."""
        return self._place("tmargin left")

    def at_outside_top_right(self) -> "LegendSpecs":
        """Place outside the plot at its top-right corner."""
        return self._place("tmargin right")

    def title_left(self) -> "LegendSpecs":
        """Place the legend title on the left."""
        self._title_loc = "left"
        return self

    def title_center(self) -> "LegendSpecs":
        """Place the legend title in the center."""
        self._title_loc = "center"
        return self

    def title_right(self) -> "LegendSpecs":
        """Place the legend title on the right."""
        self._title_loc = "right"
        return self

    def display_vertical(self) -> "LegendSpecs":
        """Lay the entries out in columns."""
        self._alignment = "vertical"
        return self

    def display_vertical_max_rows(self, value: int) -> "LegendSpecs":
        """Set the number of rows that starts a new column."""
        self._maxrows = str(int(value))
        return self

    def display_horizontal(self) -> "LegendSpecs":
        """Lay the entries out in rows."""
        self._alignment = "horizontal"
        return self

    def display_horizontal_max_cols(self, value: int) -> "LegendSpecs":
        """Set the number of columns that starts a new row."""
        self._maxcols = str(int(value))
        return self

    def display_labels_before_symbols(self) -> "LegendSpecs":
        """Put labels before their symbols."""
        self._reverse = "noreverse"
        return self

    def display_labels_after_symbols(self) -> "LegendSpecs":
        """Put labels after their symbols."""
        self._reverse = "reverse"
        return self

    def display_justify_left(self) -> "LegendSpecs":
        """Left-justify the labels."""
        self._justification = "Left"
        return self

    def display_justify_right(self) -> "LegendSpecs":
        """Right-justify the labels."""
        self._justification = "Right"
        return self

    def display_start_from_first(self) -> "LegendSpecs":
        """List entries from first to last."""
        self._invert = "noinvert"
        return self

    def display_start_from_last(self) -> "LegendSpecs":
        """List entries from last to first."""
        self._invert = "invert"
        return self

    def display_spacing(self, value: int) -> "LegendSpecs":
        """Set the spacing between entries."""
        self._spacing = int(value)
        return self

    def display_expand_width_by(self, value: int) -> "LegendSpecs":
        """Enlarge (or reduce) the width of the legend frame."""
        self._width_increment = int(value)
        return self

    def display_expand_height_by(self, value: int) -> "LegendSpecs":
        """Enlarge (or reduce) the height of the legend frame."""
        self._height_increment = int(value)
        return self

    def display_symbol_length(self, value: int) -> "LegendSpecs":
        """Set the length of the sample symbols."""
        self._samplen = int(value)
        return self

    def repr(self) -> str:
        if self.show_repr() == "no":
            return "unset key"
        titlespecs = self.title_repr()
        if titlespecs:
            titlespecs += " " + self._title_loc
        parts = [
            "set key",
            self._placement,
            self._opaque,
            self._alignment,
            self._justification,
            self._invert,
            self._reverse,
            f"width {self._width_increment}",
            f"height {self._height_increment}",
            f"samplen {self._samplen}",
            f"spacing {self._spacing}",
            self.text_repr(),
            titlespecs,
            self.frame_repr(),
            f"maxrows {self._maxrows}",
            f"maxcols {self._maxcols}",
        ]
        return remove_extra_whitespaces(" ".join(parts))