from plotspecs.lines import (
    DEFAULT_LEGEND_FRAME_LINECOLOR,
    FilledCurvesSpecs,
    FrameSpecs,
    LineSpecs,
    PointSpecs,
)


def test_line_specs_empty_by_default():
    assert LineSpecs().repr() == ""


def test_line_specs_full_order():
    specs = LineSpecs().dash_type(6).line_color("red").line_width(5).line_type(4).line_style(3)
    assert specs.repr() == "linestyle 3 linetype 4 linewidth 5 linecolor 'red' dashtype 6"


def test_line_specs_partial_has_no_extra_spaces():
    specs = LineSpecs().line_width(2).dash_type(1)
    assert specs.repr() == "linewidth 2 dashtype 1"


def test_line_specs_chaining_returns_same_object():
    specs = LineSpecs()
    assert specs.line_color("blue") is specs


def test_line_specs_str_matches_repr():
    specs = LineSpecs().line_type(7)
    assert str(specs) == specs.repr() == "linetype 7"


def test_point_specs():
    assert PointSpecs().repr() == ""
    assert PointSpecs().point_type(7).repr() == "pointtype 7"
    assert PointSpecs().point_size(3).repr() == "pointsize 3"
    assert PointSpecs().point_size(3).point_type(7).repr() == "pointtype 7 pointsize 3"


def test_filled_curves_specs():
    specs = FilledCurvesSpecs()
    assert specs.repr() == ""
    assert specs.above().repr() == "above"
    assert specs.below().repr() == "below"


def test_frame_default_is_shown_box():
    text = FrameSpecs().repr()
    assert text.startswith("box ")
    assert f"linecolor '{DEFAULT_LEGEND_FRAME_LINECOLOR}'" in text


def test_frame_hidden():
    assert FrameSpecs().frame_hide().repr() == "nobox"
    assert FrameSpecs().frame_show(False).repr() == "nobox"


def test_frame_show_after_hide():
    specs = FrameSpecs().frame_hide().frame_show()
    assert specs.repr().startswith("box")


def test_frame_custom_line():
    specs = (
        FrameSpecs()
        .frame_line_style(3)
        .frame_line_type(4)
        .frame_line_width(5)
        .frame_line_color("red")
        .frame_dash_type(6)
    )
    assert specs.repr() == "box linestyle 3 linetype 4 linewidth 5 linecolor 'red' dashtype 6"