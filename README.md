# shapekit

Geometric shapes whose arithmetic follows a chosen number kind. Each kind
behaves like a fixed-width machine number. Integer kinds truncate a float
constant such as pi when they convert it, and they raise an error when a
result goes out of range. The float kind rounds every result to single
precision. The same shape can therefore give different results for
different kinds.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Number kinds: `shapekit.numeric`

`NumKind` is an enum with the members `I32`, `I64`, `USIZE`, `U32`, `U64`
and `F32`.

- `validate(value)` checks a value and returns it as a value of the kind:
  - A bool, or anything that is not a number, raises `TypeError`.
  - An integer kind also raises `TypeError` for a float.
  - An integer kind raises `OverflowError` for a value outside its range.
  - `F32` rounds the value to single precision.
- `from_float(value)` converts a float the way a numeric cast does:
  - In an integer kind it truncates towards zero.
  - It saturates at the bounds of the kind.
  - It maps NaN to 0.
- `to_float(value)` widens a value to a Python float.
- `add`, `sub`, `mul` and `div` do arithmetic in the kind:
  - Integer results outside the range raise `OverflowError`.
  - Integer division truncates towards zero.
  - Integer division by zero raises `ZeroDivisionError`.
  - `F32` division by zero gives an infinity, or NaN for 0 / 0.
- `is_float`, `min_value` and `max_value` describe the kind.

The helper functions `square(value, kind)`, `half(value, kind)`,
`cube(value, kind)` and `double(value, kind)` work in the given kind.

## Shapes: `shapekit.shapes`

`Shape` is the abstract base class, with the methods `area()` and
`volume()`. The shapes are frozen dataclasses. Each one checks its fields
against its `kind` when it is created.

| Shape | How to build it | Results |
|---|---|---|
| `Circle` | `Circle.from_radius(radius, kind)` or `Circle.from_diameter(diameter, kind)` | The area is pi × radius². The volume is always zero. |
| `Sphere` | `Sphere.from_radius(radius, kind)` or `Sphere.from_diameter(diameter, kind)` | Offers `area()`, `volume()` and `circumference()`. |
| `Cube` | `Cube(sides, kind)` | The area is 6 × sides². The volume is sides³. |
| `Prism` | `Prism(length, width, height, kind)` | The area is the total surface. The volume is length × width × height. |

```python
from shapekit.numeric import NumKind
from shapekit.shapes import Circle, Prism

Circle.from_radius(10, NumKind.I32).area()       # 300: pi becomes 3
Circle.from_diameter(42.0, NumKind.F32).radius   # 21.0
Prism(5, 10, 15, NumKind.I32).area()             # 550
Prism(5, 10, 15, NumKind.I32).volume()           # 750
```

## What it does not do

shapekit is a library only. It has no command-line tool. It does not store
shapes or read them from files.