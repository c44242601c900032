# plotspecs

`plotspecs` builds gnuplot command strings from small option objects whose
setters can be chained. Each specs object keeps its options and turns them into
a gnuplot command, or a fragment of one, with `repr()`. Calling `str()` on it
gives the same text. The package also has `Vec3`, a plain 3D vector type.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

Every setter returns the object itself, so calls can be chained:

```python
from plotspecs.border import BorderSpecs
from plotspecs.legend import LegendSpecs
from plotspecs.labels import AxisLabelSpecs
from plotspecs.draw import DrawSpecs
from plotspecs.tics import TicsSpecsMajor, TicsSpecsMinor
from plotspecs.grid import GridSpecs
from plotspecs.histogram import HistogramStyleSpecs
from plotspecs.fill import FillStyleSpecs

border = BorderSpecs().clear().bottom().left().line_width(2)
print(border.repr())

legend = LegendSpecs().at_outside_right_top().display_horizontal().transparent()
print(legend.repr())

xlabel = AxisLabelSpecs("x").text("Distance (km)").rotate_none()
print(xlabel.repr())

curve = DrawSpecs("'data.dat'", "1:2", "lines").label("measured").line_color("blue")
print(curve.repr())

xtics = TicsSpecsMajor("x").interval(0, 0.5, 3).format("%.1f")
print(xtics.repr())
print(TicsSpecsMinor("x").number(4).repr())

grid = GridSpecs()
grid.xtics().line_color("gray")
print(grid.repr())   # one command per line: the grid itself, then each tics grid

print(HistogramStyleSpecs().clustered_with_gap(2).repr())
print(FillStyleSpecs().solid().intensity(0.5).border_hide().repr())
```

### Modules

- `plotspecs.core`: the base `Specs` class; the helpers `remove_extra_whitespaces`,
  `option_str`, `option_value_str` and `format_number`; and the show, depth, font,
  text and offset options (`ShowOptions`/`ShowSpecs`, `DepthOptions`/`DepthSpecs`,
  `FontOptions`/`FontSpecs`, `TextOptions`/`TextSpecs`, `OffsetOptions`/`OffsetSpecs`).
- `plotspecs.lines`: line, point, filled-curve and frame options
  (`LineSpecs`, `PointSpecs`, `FilledCurvesSpecs`, `FrameSpecs` and their mixins).
- `plotspecs.fill`: `FillOptions`/`FillSpecs` and the `set style fill` builder,
  `FillStyleSpecs`. Fill intensities are clamped to the range 0 to 1.
- `plotspecs.draw`: `DrawSpecs` for one plotted element. `xtics` and `ytics` take
  a column number or a column name.
- `plotspecs.labels`: `AxisLabelSpecs`, plus `TitleOptions`/`TitleSpecs`, which the
  legend uses.
- `plotspecs.border`: `BorderSpecs`, with its edges held as a bit mask.
- `plotspecs.histogram`: `HistogramStyleSpecs`.
- `plotspecs.grid`: `GridSpecsBase` and `GridSpecs`, with grid lines for each kind of tic.
- `plotspecs.legend`: `LegendSpecs`.
- `plotspecs.tics`: `TicsOptions`, `TicsSpecs`, `TicsSpecsMajor` and `TicsSpecsMinor`.
- `plotspecs.vector`: `Vec3` and `to_vec2`.

### Vectors

```python
from plotspecs.vector import Vec3, to_vec2

a = Vec3(1.0, 0.0, 0.0)
b = Vec3(0.0, 1.0, 0.0)
print(Vec3.cross(a, b))          # Vec3(x=0.0, y=0.0, z=1.0)
print((a + b).length())
print(Vec3.filled(2.0).normalized())
print(to_vec2(a))                # (1.0, 0.0)
```

Vectors compare in lexicographic order by x, then y, then z. The arithmetic
operators work component by component, and a plain number on the right is
used for all three components. `Vec3.from_vec2` and `Vec3.cross` also accept
2D vectors, either as objects with `x` and `y` attributes or as pairs; their
z is taken as 0 in a cross product.

### Errors

`TicsSpecsMajor` and `TicsSpecsMinor` raise `ValueError` if they are given an
empty axis name. `TicsSpecsMajor.interval` raises `ValueError` for an increment
that is not positive, or for an end that is not greater than the start, and
`at` and `add` raise it when labels and values differ in length.
`TicsSpecsMajor.repr` raises `RuntimeError` if `start` or `end` was set without
the values they depend on. `FontOptions.font_size` raises `ValueError` for a
negative size.

### What it does not do

The package only builds command text. It does not start gnuplot, draw or
save plots, or hold data series; passing the strings to gnuplot is left to
the caller.