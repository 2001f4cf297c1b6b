"""Two- and three-dimensional shapes computed in a chosen numeric kind."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields

from .numeric import NumKind, Number, cube, double, square


class Shape(ABC):
    """Anything that can report its area and volume."""

    @abstractmethod
    def area(self) -> Number:
        """Surface area of the shape."""

    @abstractmethod
    def volume(self) -> Number:
        """Volume enclosed by the shape."""


class _Measured(Shape):
    """Validates every numeric field against the shape's kind on creation."""

    kind: NumKind

    def __post_init__(self) -> None:
        if not isinstance(self.kind, NumKind):
            raise TypeError(f"kind must be a NumKind, got {self.kind!r}")
        for field in fields(self):  # type: ignore[arg-type]
            if field.name != "kind":
                checked = self.kind.validate(getattr(self, field.name))
                object.__setattr__(self, field.name, checked)


@dataclass(frozen=True)
class Circle(_Measured):
    """A circle; its volume is always zero."""

    radius: Number
    diameter: Number
    kind: NumKind

    @classmethod
    def from_radius(cls, radius: Number, kind: NumKind) -> Circle:
        radius = kind.validate(radius)
        return cls(radius, kind.mul(radius, kind.from_float(2.0)), kind)

    @classmethod
    def from_diameter(cls, diameter: Number, kind: NumKind) -> Circle:
        diameter = kind.validate(diameter)
        return cls(kind.div(diameter, kind.from_float(2.0)), diameter, kind)

    def area(self) -> Number:
        return self.kind.mul(self.kind.from_float(math.pi), square(self.radius, self.kind))

    def volume(self) -> Number:
        return self.kind.from_float(0.0)


@dataclass(frozen=True)
class Sphere(_Measured):
    """A sphere."""

    radius: Number
    diameter: Number
    kind: NumKind

    @classmethod
    def from_radius(cls, radius: Number, kind: NumKind) -> Sphere:
        radius = kind.validate(radius)
        return cls(radius, kind.mul(radius, kind.from_float(2.0)), kind)

    @classmethod
    def from_diameter(cls, diameter: Number, kind: NumKind) -> Sphere:
        diameter = kind.validate(diameter)
        return cls(kind.div(diameter, kind.from_float(2.0)), diameter, kind)

    def circumference(self) -> Number:
        kind = self.kind
        two_pi = kind.mul(kind.from_float(2.0), kind.from_float(math.pi))
        return kind.mul(two_pi, self.radius)

    def area(self) -> Number:
        kind = self.kind
        four_pi = kind.mul(kind.from_float(4.0), kind.from_float(math.pi))
        return kind.mul(four_pi, square(self.radius, kind))

    def volume(self) -> Number:
        kind = self.kind
        factor = kind.mul(kind.from_float(4.0 / 3.0), kind.from_float(math.pi))
        return kind.mul(factor, cube(self.radius, kind))


@dataclass(frozen=True)
class Cube(_Measured):
    """A cube with equal sides."""

    sides: Number
    kind: NumKind

    def area(self) -> Number:
        return self.kind.mul(self.kind.from_float(6.0), square(self.sides, self.kind))

    def volume(self) -> Number:
        return cube(self.sides, self.kind)


@dataclass(frozen=True)
class Prism(_Measured):
    """A rectangular box."""

    length: Number
    width: Number
    height: Number
    kind: NumKind

    def area(self) -> Number:
        kind = self.kind
        h_w = kind.mul(self.height, self.width)
        w_l = kind.mul(self.width, self.length)
        h_l = kind.mul(self.height, self.length)
        return double(kind.add(kind.add(h_w, w_l), h_l), kind)

    def volume(self) -> Number:
        kind = self.kind
        return kind.mul(kind.mul(self.length, self.width), self.height)