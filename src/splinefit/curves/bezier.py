"""
Cubic Bezier curve value for splinefit.

B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3, t in [0, 1].
"""

import numpy as np

from splinefit.curves.parametric import ParametricCurve, to_point
from splinefit.models import CubicBezier


def _frozen(p):
    arr = to_point(p)
    arr.flags.writeable = False
    return arr


def _bernstein(i, t):
    """Compute Bernstein basis polynomial value B_i,3(t)."""
    if i == 0:
        return (1 - t) ** 3
    elif i == 1:
        return 3 * (1 - t) ** 2 * t
    elif i == 2:
        return 3 * (1 - t) * t ** 2
    else:
        return t ** 3


class CubicBezierCurve(ParametricCurve):
    """
    Immutable cubic Bezier defined by four points.

    The points are stored as read-only arrays; transformations return new
    curves.
    """

    __slots__ = ("_points",)

    def __init__(self, start, control1, control2, end):
        self._points = (_frozen(start), _frozen(control1), _frozen(control2), _frozen(end))

    @property
    def start(self):
        return self._points[0]

    @property
    def control1(self):
        return self._points[1]

    @property
    def control2(self):
        return self._points[2]

    @property
    def end(self):
        return self._points[3]

    @property
    def points(self):
        """The four control points as a (4, 2) array."""
        return np.array(self._points)

    def at(self, t):
        p0, p1, p2, p3 = self._points
        return (
            _bernstein(0, t) * p0
            + _bernstein(1, t) * p1
            + _bernstein(2, t) * p2
            + _bernstein(3, t) * p3
        )

    def tangent_at(self, t):
        p0, p1, p2, p3 = self._points
        u = 1 - t
        return 3 * u * u * (p1 - p0) + 6 * u * t * (p2 - p1) + 3 * t * t * (p3 - p2)

    def acceleration_at(self, t):
        p0, p1, p2, p3 = self._points
        return 6 * (1 - t) * (p2 - 2 * p1 + p0) + 6 * t * (p3 - 2 * p2 + p1)

    @property
    def start_velocity(self):
        return 3 * (self.control1 - self.start)

    @property
    def end_velocity(self):
        return 3 * (self.end - self.control2)

    def translated(self, offset):
        """Return a copy shifted by offset."""
        offset = to_point(offset)
        return CubicBezierCurve(*(p + offset for p in self._points))

    def split_at(self, t):
        """Split with de Casteljau's algorithm, returning (left, right)."""
        p0, p1, p2, p3 = self._points
        q0 = p0 + (p1 - p0) * t
        q1 = p1 + (p2 - p1) * t
        q2 = p2 + (p3 - p2) * t
        r0 = q0 + (q1 - q0) * t
        r1 = q1 + (q2 - q1) * t
        s = r0 + (r1 - r0) * t
        return CubicBezierCurve(p0, q0, r0, s), CubicBezierCurve(s, r1, q2, p3)

    def is_finite(self):
        return all(np.all(np.isfinite(p)) for p in self._points)

    def to_model(self):
        """Convert to the serializable CubicBezier record."""
        p0, p1, p2, p3 = self._points
        return CubicBezier(p0=p0.tolist(), p1=p1.tolist(), p2=p2.tolist(), p3=p3.tolist())

    @classmethod
    def from_model(cls, model):
        return cls(model.p0, model.p1, model.p2, model.p3)

    def __eq__(self, other):
        if not isinstance(other, CubicBezierCurve):
            return NotImplemented
        return all(np.array_equal(a, b) for a, b in zip(self._points, other._points))

    def __hash__(self):
        return hash(tuple(float(c) for p in self._points for c in p))

    def __repr__(self):
        pts = ", ".join(f"({p[0]:.4g}, {p[1]:.4g})" for p in self._points)
        return f"CubicBezierCurve({pts})"
