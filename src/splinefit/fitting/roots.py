"""
Root finding and critical point detection for splinefit.

find_roots() is a stepping heuristic, not a certified enumerator: it walks
the interval with a slope-adaptive step and refines sign changes by
bisection. Functions that oscillate faster than the step can hide roots.
The acceptance constants below are tuned empirically and segment counts
downstream depend on them.
"""

import math

import numpy as np

from splinefit.curves.parametric import cross
from splinefit.errors import InvalidDomain
from splinefit.tracer import get_tracer, trace

ROUNDING_ORDER = 8
EQUALITY_THRESHOLD = 10.0 ** -ROUNDING_ORDER

SLOPE_EPS = 1e-4
MIN_STEP = 1e-4
MAX_STEP = 0.1
STEP_SCALE = 0.1
FLAT_CROSSING_GATE = 0.1
BISECTION_ITERATIONS = 50


def _clamp(value, lo, hi):
    return max(lo, min(value, hi))


def _slope(f, t):
    return (f(t + SLOPE_EPS) - f(t - SLOPE_EPS)) / (2 * SLOPE_EPS)


def _step_size(slope):
    if slope == 0 or not math.isfinite(slope):
        # Flat: take the largest step; infinite: take the smallest
        return MAX_STEP if slope == 0 else MIN_STEP
    return _clamp(STEP_SCALE / abs(slope), MIN_STEP, MAX_STEP)


def _bisect(f, a, b, fa):
    """Refine a bracketed root; returns the last midpoint."""
    root = (a + b) / 2
    for _ in range(BISECTION_ITERATIONS):
        root = (a + b) / 2
        fr = f(root)
        if abs(fr) < EQUALITY_THRESHOLD:
            break
        if fa * fr <= 0:
            b = root
        else:
            a = root
            fa = fr
    return root


def find_roots(f, t_start, t_end):
    """
    Locate approximate zeros of f over [t_start, t_end].

    Args:
        f: callable t -> float
        t_start: interval start (finite)
        t_end: interval end (finite)

    Returns:
        list of root parameters in the order they were found (ascending)

    Raises:
        InvalidDomain: if either bound is not finite
    """
    if not (math.isfinite(t_start) and math.isfinite(t_end)):
        raise InvalidDomain(t_start, t_end)

    roots = []

    t_curr = t_start
    v_curr = f(t_curr)
    if abs(v_curr) < EQUALITY_THRESHOLD:
        roots.append(t_curr)
    slope_curr = _slope(f, t_curr)

    while abs(t_end - t_curr) >= EQUALITY_THRESHOLD:
        t_next = t_curr + _step_size(slope_curr)
        if t_next > t_end:
            t_next = t_end
        v_next = f(t_next)
        slope_next = _slope(f, t_next)

        if abs(v_next - v_curr) >= EQUALITY_THRESHOLD and abs(v_next) < EQUALITY_THRESHOLD:
            roots.append(t_next)
        elif v_curr * v_next < 0 or (
            slope_curr * slope_next < 0
            and (abs(v_curr) <= FLAT_CROSSING_GATE or abs(v_next) <= FLAT_CROSSING_GATE)
        ):
            roots.append(_bisect(f, t_curr, t_next, v_curr))

        t_curr, v_curr, slope_curr = t_next, v_next, slope_next

    return roots


def signed_curvature(curve, t):
    """(tangent x acceleration) / |tangent|^3; NaN or inf at zero speed."""
    tangent = curve.tangent_at(t)
    acceleration = curve.acceleration_at(t)
    speed = np.float64(np.linalg.norm(tangent))
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.float64(cross(tangent, acceleration)) / speed ** 3


@trace(label="find_critical_params")
def find_critical_params(curve, t0, t1):
    """
    Find parameters of coordinate extrema and inflections on [t0, t1].

    Runs find_roots on tangent x, tangent y and signed curvature, then
    rounds to 8 decimals, deduplicates and sorts. The interval endpoints
    are only included when one of the searches returns them.
    """
    tracer = get_tracer()

    def tangent_x(t):
        return float(curve.tangent_at(t)[0])

    def tangent_y(t):
        return float(curve.tangent_at(t)[1])

    def curvature(t):
        return float(signed_curvature(curve, t))

    critical = set()
    for name, func in (("tangent_x", tangent_x), ("tangent_y", tangent_y), ("curvature", curvature)):
        roots = find_roots(func, t0, t1)
        tracer.event(f"{name}: {len(roots)} roots", level="DEBUG")
        critical.update(round(t, ROUNDING_ORDER) for t in roots)

    result = sorted(critical)
    tracer.event(f"Found {len(result)} critical params on [{t0:.4g}, {t1:.4g}]")
    return result
