import pytest

from plotspecs.grid import (
    DEFAULT_GRID_DASHTYPE,
    DEFAULT_GRID_LINECOLOR,
    DEFAULT_GRID_LINETYPE,
    DEFAULT_GRID_LINEWIDTH,
    GridSpecs,
    GridSpecsBase,
)
from plotspecs.lines import LineSpecs


def _default_line() -> str:
    return (
        LineSpecs()
        .line_color(DEFAULT_GRID_LINECOLOR)
        .line_width(DEFAULT_GRID_LINEWIDTH)
        .line_type(DEFAULT_GRID_LINETYPE)
        .dash_type(DEFAULT_GRID_DASHTYPE)
        .repr()
    )


def test_default_grid_is_unset():
    assert GridSpecs().repr() == "unset grid"


def test_base_without_tics_hidden_is_unset():
    assert GridSpecsBase().hide().repr() == "unset grid"


def test_base_without_tics_visible():
    assert GridSpecsBase().repr() == f"set grid back {_default_line()}"


def test_major_tics_repr():
    assert GridSpecsBase("xtics", True).repr() == f"set grid xtics back {_default_line()}"


def test_minor_tics_have_comma():
    assert GridSpecsBase("mxtics", False).repr() == f"set grid mxtics back , {_default_line()}"


def test_hidden_tics():
    assert GridSpecsBase("ytics").hide().repr() == "set grid noytics"


def test_front_depth():
    assert GridSpecsBase("xtics").front().repr().startswith("set grid xtics front ")


def test_shown_grid_first_line():
    assert GridSpecs().show().repr() == f"set grid back {_default_line()}"


@pytest.mark.parametrize(
    "method, tics",
    [
        ("xtics", "xtics"),
        ("ytics", "ytics"),
        ("ztics", "ztics"),
        ("rtics", "rtics"),
        ("xtics_major_bottom", "xtics"),
        ("xtics_major_top", "x2tics"),
        ("ytics_major_left", "ytics"),
        ("ytics_major_right", "y2tics"),
        ("ztics_major", "ztics"),
        ("rtics_major", "rtics"),
    ],
)
def test_major_accessors(method, tics):
    grid = GridSpecs()
    getattr(grid, method)()
    lines = grid.repr().split("\n")
    assert lines == ["unset grid", GridSpecsBase(tics, True).repr()]


@pytest.mark.parametrize(
    "method, tics",
    [
        ("xtics_minor_bottom", "mxtics"),
        ("xtics_minor_top", "mx2tics"),
        ("ytics_minor_left", "mytics"),
        ("ytics_minor_right", "my2tics"),
        ("ztics_minor", "mztics"),
        ("rtics_minor", "mrtics"),
    ],
)
def test_minor_accessors(method, tics):
    grid = GridSpecs()
    getattr(grid, method)()
    assert grid.repr().split("\n")[1] == GridSpecsBase(tics, False).repr()


def test_accessor_returns_live_specs():
    grid = GridSpecs()
    grid.xtics().hide()
    grid.ytics().line_width(4)
    lines = grid.repr().split("\n")
    assert lines[1] == "set grid noxtics"
    assert "linewidth 4" in lines[2]
    assert len(lines) == 3