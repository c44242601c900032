import pytest

from plotspecs.border import (
    DEFAULT_BORDER_LINECOLOR,
    DEFAULT_BORDER_LINETYPE,
    DEFAULT_BORDER_LINEWIDTH,
    BorderSpecs,
)
from plotspecs.lines import LineSpecs


def _encoding(spec):
    words = spec.repr().split()
    assert words[:2] == ["set", "border"]
    return int(words[2])


SETTERS = [
    "bottom_left_front",
    "bottom_left_back",
    "bottom_right_front",
    "bottom_right_back",
    "left_vertical",
    "back_vertical",
    "right_vertical",
    "front_vertical",
    "top_left_back",
    "top_right_back",
    "top_left_front",
    "top_right_front",
]


def test_default_border():
    assert _encoding(BorderSpecs()) == 3
    r = BorderSpecs().repr()
    line = (
        LineSpecs()
        .line_type(DEFAULT_BORDER_LINETYPE)
        .line_width(DEFAULT_BORDER_LINEWIDTH)
        .line_color(DEFAULT_BORDER_LINECOLOR)
        .repr()
    )
    assert r.endswith("front " + line)


def test_clear_gives_zero():
    assert _encoding(BorderSpecs().clear()) == 0


def test_none_same_as_clear():
    assert BorderSpecs().none().repr() == BorderSpecs().clear().repr()


def test_default_equals_left_and_bottom():
    assert BorderSpecs().clear().bottom().left().repr() == BorderSpecs().repr()


@pytest.mark.parametrize(
    "alias, base",
    [
        ("bottom_left_front", "bottom"),
        ("bottom_left_back", "left"),
        ("bottom_right_front", "top"),
        ("bottom_right_back", "right"),
        ("polar", "top"),
    ],
)
def test_aliases(alias, base):
    a = getattr(BorderSpecs().clear(), alias)()
    b = getattr(BorderSpecs().clear(), base)()
    assert a.repr() == b.repr()


def test_each_edge_is_a_distinct_single_bit():
    values = [_encoding(getattr(BorderSpecs().clear(), name)()) for name in SETTERS]
    assert all(v > 0 and v & (v - 1) == 0 for v in values)
    assert len(set(values)) == len(SETTERS)


def test_edges_combine():
    spec = BorderSpecs().clear()
    for name in SETTERS:
        getattr(spec, name)()
    combined = 0
    for name in SETTERS:
        combined |= _encoding(getattr(BorderSpecs().clear(), name)())
    assert _encoding(spec) == combined


def test_setting_twice_is_idempotent():
    assert BorderSpecs().top().top().repr() == BorderSpecs().top().repr()


def test_depth_change():
    r = BorderSpecs().back().repr()
    assert " back " in r
    assert "front" not in r


def test_line_color_override():
    r = BorderSpecs().line_color("red").repr()
    assert "linecolor 'red'" in r
    assert DEFAULT_BORDER_LINECOLOR not in r


def test_chaining_returns_self():
    spec = BorderSpecs()
    assert spec.clear().top().right() is spec