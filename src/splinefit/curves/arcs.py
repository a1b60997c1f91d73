"""
Angles and closed-form arc segments.

An arc can be requested either by its raw radius and angles or by a
pre-built arc object; both shapes are carried by one tagged argument and
resolved once in resolve_arc().
"""

import math
from dataclasses import dataclass, field
from typing import Literal, Union

import numpy as np

from splinefit.curves.bezier import CubicBezierCurve
from splinefit.curves.parametric import to_point


@dataclass(frozen=True)
class Angle:
    """Immutable angle in radians with its sine and cosine computed once."""
    value: float
    sine: float = field(init=False, repr=False, compare=False)
    cosine: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "sine", math.sin(self.value))
        object.__setattr__(self, "cosine", math.cos(self.value))

    @classmethod
    def of(cls, value):
        if isinstance(value, Angle):
            return value
        return cls(float(value))

    def add(self, other):
        return Angle(self.value + float(other))

    def subtract(self, other):
        return Angle(self.value - float(other))

    def multiply(self, scalar):
        return Angle(scalar * self.value)

    def negated(self):
        return Angle(-self.value)

    def complement(self):
        """pi/2 - angle."""
        return Angle(math.pi / 2 - self.value)

    def supplement(self):
        """pi - angle."""
        return Angle(math.pi - self.value)

    def to_degrees(self):
        return math.degrees(self.value)

    def __float__(self):
        return self.value


Angle.ZERO = Angle(0.0)
Angle.HALF_PI = Angle(math.pi / 2)
Angle.PI = Angle(math.pi)
Angle.TWO_PI = Angle(2 * math.pi)


def _rotate(v, angle):
    c, s = math.cos(angle), math.sin(angle)
    return np.array([c * v[0] - s * v[1], s * v[0] + c * v[1]])


@dataclass(frozen=True)
class EllipticalArc:
    """
    Arc of an ellipse centred on the origin.

    Start/end point vectors and tangents are derived once at construction.
    A circular arc is the a == b case.
    """
    semi_major: float
    semi_minor: float
    start_angle: Angle
    end_angle: Angle
    tilt: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "start_angle", Angle.of(self.start_angle))
        object.__setattr__(self, "end_angle", Angle.of(self.end_angle))

    @property
    def sweep(self):
        return self.end_angle.value - self.start_angle.value

    def _point(self, angle):
        return _rotate(np.array([self.semi_major * angle.cosine, self.semi_minor * angle.sine]), self.tilt)

    def _tangent(self, angle):
        return _rotate(np.array([-self.semi_major * angle.sine, self.semi_minor * angle.cosine]), self.tilt)

    @property
    def start_vector(self):
        return self._point(self.start_angle)

    @property
    def end_vector(self):
        return self._point(self.end_angle)

    @property
    def start_tangent(self):
        return self._tangent(self.start_angle)

    @property
    def end_tangent(self):
        return self._tangent(self.end_angle)


class CircularArc(EllipticalArc):
    """Arc of a circle centred on the origin."""

    def __init__(self, radius, start_angle, end_angle, rotation=0.0):
        radius = abs(radius)
        super().__init__(radius, radius, start_angle, end_angle, rotation)

    @property
    def radius(self):
        return self.semi_major


@dataclass(frozen=True)
class ByAngles:
    """Arc given by radius and start/end angles."""
    radius: float
    start_angle: float
    end_angle: float
    rotation: float = 0.0
    kind: Literal["angles"] = "angles"


@dataclass(frozen=True)
class ByArc:
    """Arc given as a pre-built arc object."""
    arc: EllipticalArc
    kind: Literal["arc"] = "arc"


ArcSpec = Union[ByAngles, ByArc]


def resolve_arc(spec):
    """Turn either arc call-shape into an arc object."""
    if spec.kind == "angles":
        return CircularArc(spec.radius, spec.start_angle, spec.end_angle, spec.rotation)
    if spec.kind == "arc":
        return spec.arc
    raise ValueError(f"Unknown arc spec kind: {spec.kind!r}")


def arc_handle_factor(sweep):
    """Handle length factor (4/3)*tan(sweep/4) for a single-cubic arc."""
    return (4.0 / 3.0) * math.tan(sweep / 4)


def arc_to_bezier(start_point, arc):
    """
    Closed-form cubic Bezier for an arc starting at start_point.

    The arc's centre is placed so its start lands on start_point. Accurate
    for sweeps up to about a quarter turn.
    """
    start = to_point(start_point)
    center = start - arc.start_vector
    end = center + arc.end_vector
    factor = arc_handle_factor(arc.sweep)
    return CubicBezierCurve(
        start,
        start + arc.start_tangent * factor,
        end - arc.end_tangent * factor,
        end,
    )
