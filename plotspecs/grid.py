"""Grid line specifications for gnuplot plots."""

from __future__ import annotations

from plotspecs.core import DepthOptions, ShowOptions, Specs, remove_extra_whitespaces
from plotspecs.lines import LineOptions

__all__ = [
    "DEFAULT_GRID_LINECOLOR",
    "DEFAULT_GRID_LINEWIDTH",
    "DEFAULT_GRID_LINETYPE",
    "DEFAULT_GRID_DASHTYPE",
    "GridSpecsBase",
    "GridSpecs",
]

DEFAULT_GRID_LINECOLOR = "#e6e6e6"
DEFAULT_GRID_LINEWIDTH = 1
DEFAULT_GRID_LINETYPE = 1
DEFAULT_GRID_DASHTYPE = 0


class GridSpecsBase(LineOptions, DepthOptions, ShowOptions, Specs):
    """Grid lines along the major or minor tics of one axis."""

    def __init__(self, tics: str = "", majortics: bool = True) -> None:
        super().__init__()
        self._tics = tics
        self._majortics = bool(majortics)
        self.show(True)
        self.back()
        self.line_color(DEFAULT_GRID_LINECOLOR)
        self.line_width(DEFAULT_GRID_LINEWIDTH)
        self.line_type(DEFAULT_GRID_LINETYPE)
        self.dash_type(DEFAULT_GRID_DASHTYPE)

    def repr(self) -> str:
        visible = self.show_repr() != "no"
        if not self._tics and not visible:
            return "unset grid"
        if self._tics and not visible:
            return f"set grid no{self._tics}"
        line = self.line_repr()
        if not self._majortics:
            # minor tics need the preceding comma
            line = ", " + line
        return remove_extra_whitespaces(
            f"set grid {self._tics} {self.depth_repr()} {line}"
        )


class GridSpecs(GridSpecsBase):
    """The plot grid together with per-tics grid line specifications."""

    def __init__(self) -> None:
        super().__init__("", True)
        self._gridticsspecs: list[GridSpecsBase] = []
        self.show(False)
        self.back()

    def _gridmajor(self, tics: str) -> GridSpecsBase:
        specs = GridSpecsBase(tics, True)
        self._gridticsspecs.append(specs)
        return specs

    def _gridminor(self, tics: str) -> GridSpecsBase:
        specs = GridSpecsBase(tics, False)
        self._gridticsspecs.append(specs)
        return specs

    def xtics(self) -> GridSpecsBase:
        """Grid lines along major xtics on the bottom axis."""
        return self.xtics_major_bottom()

    def ytics(self) -> GridSpecsBase:
        """Grid lines along major ytics on the left axis."""
        return self.ytics_major_left()

    def ztics(self) -> GridSpecsBase:
        """Grid lines along major ztics."""
        return self.ztics_major()

    def rtics(self) -> GridSpecsBase:
        """Grid lines along major rtics."""
        return self.rtics_major()

    def xtics_major_bottom(self) -> GridSpecsBase:
        """Grid lines along major xtics on the bottom axis."""
        return self._gridmajor("xtics")

    def xtics_major_top(self) -> GridSpecsBase:
        """Grid lines along major xtics on the top axis."""
        return self._gridmajor("x2tics")

    def xtics_minor_bottom(self) -> GridSpecsBase:
        """Grid lines along minor xtics on the bottom axis."""
        return self._gridminor("mxtics")

    def xtics_minor_top(self) -> GridSpecsBase:
        """Grid lines along minor xtics on the top axis."""
        return self._gridminor("mx2tics")

    def ytics_major_left(self) -> GridSpecsBase:
        """Grid lines along major ytics on the left axis."""
        return self._gridmajor("ytics")

    def ytics_major_right(self) -> GridSpecsBase:
        """Grid lines along major ytics on the right axis."""
        return self._gridmajor("y2tics")

    def ytics_minor_left(self) -> GridSpecsBase:
        """Grid lines along minor ytics on the left axis."""
        return self._gridminor("mytics")

    def ytics_minor_right(self) -> GridSpecsBase:
        """Grid lines along minor ytics on the right axis."""
        return self._gridminor("my2tics")

    def ztics_major(self) -> GridSpecsBase:
        """Grid lines along major ztics."""
        return self._gridmajor("ztics")

    def ztics_minor(self) -> GridSpecsBase:
        """Grid lines along minor ztics."""
        return self._gridminor("mztics")

    def rtics_major(self) -> GridSpecsBase:
        """Grid lines along major rtics."""
        return self._gridmajor("rtics")

    def rtics_minor(self) -> GridSpecsBase:
        """Grid lines along minor rtics."""
        return self._gridminor("mrtics")

    def repr(self) -> str:
        lines = [super().repr()]
        lines.extend(specs.repr() for specs in self._gridticsspecs)
        return "\n".join(lines)