import pytest

from plotspecs.core import TextSpecs
from plotspecs.labels import TitleSpecs
from plotspecs.legend import (
    DEFAULT_LEGEND_FRAME_EXTRA_HEIGHT,
    DEFAULT_LEGEND_FRAME_EXTRA_WIDTH,
    DEFAULT_LEGEND_SAMPLE_LENGTH,
    DEFAULT_LEGEND_SPACING,
    LegendSpecs,
)
from plotspecs.lines import FrameSpecs


def test_hidden_legend():
    assert LegendSpecs().hide().repr() == "unset key"


def test_default_layout():
    r = LegendSpecs().repr()
    assert r.startswith("set key inside right top opaque vertical Left noinvert reverse ")
    assert r.endswith(f"{FrameSpecs().repr()} maxrows auto maxcols auto")


def test_default_sizes_and_text():
    r = LegendSpecs().repr()
    sizes = (
        f"width {DEFAULT_LEGEND_FRAME_EXTRA_WIDTH} "
        f"height {DEFAULT_LEGEND_FRAME_EXTRA_HEIGHT} "
        f"samplen {DEFAULT_LEGEND_SAMPLE_LENGTH} "
        f"spacing {DEFAULT_LEGEND_SPACING} "
        f"{TextSpecs().repr()} "
    )
    assert sizes in r
    assert "title" not in r


@pytest.mark.parametrize(
    "method, placement",
    [
        ("at_left", "inside left"),
        ("at_right", "inside right"),
        ("at_center", "inside center"),
        ("at_top", "inside center top"),
        ("at_top_left", "inside left top"),
        ("at_top_right", "inside right top"),
        ("at_bottom", "inside center bottom"),
        ("at_bottom_left", "inside left bottom"),
        ("at_bottom_right", "inside right bottom"),
        ("at_outside_left", "lmargin center"),
        ("at_outside_left_top", "lmargin top"),
        ("at_outside_left_bottom", "lmargin bottom"),
        ("at_outside_right", "rmargin center"),
        ("at_outside_right_top", "rmargin top"),
        ("at_outside_right_bottom", "rmargin bottom"),
        ("at_outside_bottom", "bmargin center"),
        ("at_outside_bottom_left", "bmargin left"),
        ("at_outside_bottom_right", "bmargin right"),
        ("at_outside_top", "tmargin center"),
        ("at_outside_top_left", "tmargin left"),
        ("at_outside_top_right", "tmargin right"),
    ],
)
def test_placements(method, placement):
    legend = LegendSpecs()
    assert getattr(legend, method)() is legend
    assert legend.repr().startswith(f"set key {placement} opaque ")


@pytest.mark.parametrize(
    "method, loc",
    [("title_left", "left"), ("title_center", "center"), ("title_right", "right")],
)
def test_title_location(method, loc):
    legend = getattr(LegendSpecs().title("Legend"), method)()
    expected = TitleSpecs().title("Legend").title_repr() + " " + loc
    assert expected in legend.repr()


def test_display_options():
    r = (
        LegendSpecs()
        .transparent()
        .display_horizontal()
        .display_justify_right()
        .display_start_from_last()
        .display_labels_before_symbols()
        .repr()
    )
    assert r.startswith("set key inside right top noopaque horizontal Right invert noreverse ")


def test_numeric_display_options():
    r = (
        LegendSpecs()
        .display_expand_width_by(3)
        .display_expand_height_by(4)
        .display_symbol_length(5)
        .display_spacing(6)
        .display_vertical_max_rows(7)
        .display_horizontal_max_cols(8)
        .repr()
    )
    assert "width 3 height 4 samplen 5 spacing 6 " in r
    assert r.endswith("maxrows 7 maxcols 8")


def test_frame_hidden():
    r = LegendSpecs().frame_hide().repr()
    assert "nobox" in r
    assert " box " not in r


def test_font_in_text():
    r = LegendSpecs().font_name("Times").font_size(12).repr()
    assert "font 'Times,12'" in r


def test_str_matches_repr():
    legend = LegendSpecs().at_bottom()
    assert str(legend) == legend.repr()