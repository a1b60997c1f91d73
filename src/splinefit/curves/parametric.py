"""
Parametric curve abstraction for splinefit.

A curve maps a scalar parameter t to a 2D point. Points and vectors are
NumPy float64 arrays of shape (2,). Subclasses supply at(t); tangent and
acceleration default to finite-difference estimates and may be overridden
with closed-form derivatives.
"""

from abc import ABC, abstractmethod

import numpy as np

# Finite-difference step for the default derivative estimates
DERIVATIVE_EPS = 1e-4


def to_point(p):
    """Convert an (x, y) pair into a new float64 array."""
    return np.array(p, dtype=np.float64).reshape(2)


def is_finite_point(p):
    """Check that both coordinates are finite."""
    return bool(np.all(np.isfinite(p)))


def normalize(v):
    """Return v scaled to unit length, or the zero vector if v has no length."""
    norm = np.linalg.norm(v)
    if norm > 0:
        return v / norm
    return np.zeros(2)


def cross(a, b):
    """2D cross product (z component of a x b)."""
    return float(a[0] * b[1] - a[1] * b[0])


class ParametricCurve(ABC):
    """Base class for curves evaluated by parameter."""

    __slots__ = ()

    @abstractmethod
    def at(self, t):
        """Position at parameter t."""

    def tangent_at(self, t):
        """First derivative, estimated by central difference."""
        eps = DERIVATIVE_EPS
        p0 = to_point(self.at(t - eps))
        p1 = to_point(self.at(t + eps))
        return (p1 - p0) / (2 * eps)

    def acceleration_at(self, t):
        """Second derivative, estimated with a five-point stencil."""
        eps = DERIVATIVE_EPS
        pm2 = to_point(self.at(t - 2 * eps))
        pm1 = to_point(self.at(t - eps))
        p = to_point(self.at(t))
        pp1 = to_point(self.at(t + eps))
        pp2 = to_point(self.at(t + 2 * eps))
        return (-pp2 + 16 * pp1 - 30 * p + 16 * pm1 - pm2) / (12 * eps * eps)


class FunctionCurve(ParametricCurve):
    """
    Curve built from plain coordinate functions.

    Args:
        x: callable t -> x coordinate
        y: callable t -> y coordinate
        dx: optional callable t -> dx/dt
        dy: optional callable t -> dy/dt

    Derivatives fall back to finite differences unless both dx and dy
    are given.
    """

    def __init__(self, x, y, dx=None, dy=None):
        self._x = x
        self._y = y
        self._dx = dx
        self._dy = dy

    def at(self, t):
        return np.array([self._x(t), self._y(t)], dtype=np.float64)

    def tangent_at(self, t):
        if self._dx is None or self._dy is None:
            return super().tangent_at(t)
        return np.array([self._dx(t), self._dy(t)], dtype=np.float64)
