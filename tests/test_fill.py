import pytest

from plotspecs.fill import FillSpecs, FillStyleSpecs


def test_fill_specs_default_is_empty():
    assert FillSpecs().repr() == ""


def test_fill_specs_str_matches_repr():
    specs = FillSpecs().fill_solid().fill_color("blue")
    assert str(specs) == specs.repr()


def test_fill_specs_chaining_returns_same_object():
    specs = FillSpecs()
    assert specs.fill_solid() is specs
    assert specs.border_hide() is specs


def test_fill_specs_solid():
    assert FillSpecs().fill_solid().repr() == "fillstyle solid"


def test_fill_specs_empty():
    assert FillSpecs().fill_empty().repr() == "fillstyle empty"


def test_fill_specs_pattern():
    assert FillSpecs().fill_pattern(4).repr() == "fillstyle pattern 4"


def test_fill_specs_color_comes_first():
    result = FillSpecs().fill_color("red").fill_solid().repr()
    assert result.startswith("fillcolor 'red'")
    assert result.endswith("fillstyle solid")


def test_fill_specs_transparent_implies_solid():
    assert FillSpecs().fill_transparent().repr() == "fillstyle transparent solid"


def test_fill_specs_transparent_keeps_existing_mode():
    assert FillSpecs().fill_pattern(2).fill_transparent().repr() == (
        "fillstyle transparent pattern 2"
    )


@pytest.mark.parametrize("value", [-3.0, 0.0])
def test_fill_specs_intensity_clamped_low(value):
    assert FillSpecs().fill_intensity(value).repr() == "fillstyle solid 0"


@pytest.mark.parametrize("value", [1.0, 7.5])
def test_fill_specs_intensity_clamped_high(value):
    assert FillSpecs().fill_intensity(value).repr() == "fillstyle solid 1"


def test_fill_specs_border_hidden():
    assert FillSpecs().border_hide().repr() == "noborder"


def test_fill_specs_border_shown_with_options():
    result = FillSpecs().border_line_color("green").border_line_width(3).border_show().repr()
    assert result == "border linecolor 'green' linewidth 3"


def test_fill_specs_border_options_ignored_without_show():
    assert FillSpecs().border_line_color("green").repr() == ""


def test_fill_style_default_is_empty():
    assert FillStyleSpecs().repr() == ""


def test_fill_style_solid():
    assert FillStyleSpecs().solid().repr() == "set style fill solid"


def test_fill_style_empty():
    assert FillStyleSpecs().empty().repr() == "set style fill empty"


def test_fill_style_pattern():
    assert FillStyleSpecs().pattern(5).repr() == "set style fill pattern 5"


def test_fill_style_transparent_solid():
    assert FillStyleSpecs().transparent().repr() == "set style fill transparent solid"


def test_fill_style_transparent_off_still_solid():
    assert FillStyleSpecs().transparent(False).repr() == "set style fill solid"


def test_fill_style_intensity_clamped():
    assert FillStyleSpecs().intensity(4).repr() == "set style fill solid 1"
    assert FillStyleSpecs().intensity(-1).repr() == "set style fill solid 0"


def test_fill_style_border_hidden():
    assert FillStyleSpecs().border_hide().repr() == "set style fill noborder"


def test_fill_style_border_with_solid():
    result = FillStyleSpecs().solid().border_line_color("black").border_show().repr()
    assert result == "set style fill solid border linecolor 'black'"


def test_fill_style_has_no_double_spaces():
    result = FillStyleSpecs().pattern(1).border_line_width(2).border_show().repr()
    assert "  " not in result
    assert result == result.strip()