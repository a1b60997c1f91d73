"""
Concrete parametric curves with closed-form derivatives.

All curves take the angle t in radians. Angle values are accepted too.
"""

import math

import numpy as np

from splinefit.curves.parametric import ParametricCurve, to_point


def _trig(t):
    sine = getattr(t, "sine", None)
    if sine is not None:
        return t.cosine, sine
    return math.cos(t), math.sin(t)


def _rotate(v, angle):
    if angle == 0:
        return v
    c, s = math.cos(angle), math.sin(angle)
    return np.array([c * v[0] - s * v[1], s * v[0] + c * v[1]])


class Circle(ParametricCurve):
    """Circle of the given radius; a negative radius is taken by magnitude."""

    def __init__(self, radius, center=(0.0, 0.0)):
        self.radius = abs(float(radius))
        self.center = to_point(center)

    def at(self, t):
        cos_t, sin_t = _trig(t)
        return self.center + self.radius * np.array([cos_t, sin_t])

    def tangent_at(self, t):
        cos_t, sin_t = _trig(t)
        return np.array([-self.radius * sin_t, self.radius * cos_t])

    def acceleration_at(self, t):
        cos_t, sin_t = _trig(t)
        return np.array([-self.radius * cos_t, -self.radius * sin_t])

    def __repr__(self):
        return f"Circle(radius={self.radius}, center={self.center.tolist()})"


class Ellipse(ParametricCurve):
    """Ellipse with semi-axes a, b rotated by tilt radians about its centre."""

    def __init__(self, a, b, center=(0.0, 0.0), tilt=0.0):
        self.a = float(a)
        self.b = float(b)
        self.center = to_point(center)
        self.tilt = float(tilt)

    @property
    def focal_distance(self):
        return math.sqrt(abs(self.a ** 2 - self.b ** 2))

    def at(self, t):
        cos_t, sin_t = _trig(t)
        return self.center + _rotate(np.array([self.a * cos_t, self.b * sin_t]), self.tilt)

    def tangent_at(self, t):
        cos_t, sin_t = _trig(t)
        return _rotate(np.array([-self.a * sin_t, self.b * cos_t]), self.tilt)

    def acceleration_at(self, t):
        cos_t, sin_t = _trig(t)
        return _rotate(np.array([-self.a * cos_t, -self.b * sin_t]), self.tilt)

    def __repr__(self):
        return f"Ellipse(a={self.a}, b={self.b}, center={self.center.tolist()}, tilt={self.tilt})"


class Superellipse(ParametricCurve):
    """
    Superellipse with radii a, b and shape exponent n.

    Points are (a*sgn(cos t)*|cos t|^e, b*sgn(sin t)*|sin t|^e) with
    e = 2^(1-n). n = 1 is an ellipse; larger n squares it off.
    """

    def __init__(self, a, b, n):
        self.a = float(a)
        self.b = float(b)
        self.n = float(n)
        self.exp = 2.0 ** (1.0 - self.n)

    def at(self, t):
        cos_t, sin_t = _trig(t)
        return np.array([
            self.a * math.copysign(abs(cos_t) ** self.exp, cos_t),
            self.b * math.copysign(abs(sin_t) ** self.exp, sin_t),
        ])

    def tangent_at(self, t):
        cos_t, sin_t = _trig(t)
        # |x|^(e-1) is infinite at the axes when e < 1
        with np.errstate(divide="ignore", invalid="ignore"):
            x = -self.exp * self.a * sin_t * np.power(np.float64(abs(cos_t)), self.exp - 1)
            y = self.exp * self.b * cos_t * np.power(np.float64(abs(sin_t)), self.exp - 1)
        if not (np.isfinite(x) and np.isfinite(y)):
            return super().tangent_at(float(t))
        return np.array([x, y], dtype=np.float64)

    def __repr__(self):
        return f"Superellipse(a={self.a}, b={self.b}, n={self.n})"
