"""
Cubic Bezier fitting for splinefit.

Fits one cubic Bezier to a parameter interval of a curve. The endpoints
and end tangent directions are taken from the curve; the two handle
lengths are solved so the Bezier passes through the curve's midpoint.
"""

import numpy as np

from splinefit.curves.bezier import CubicBezierCurve
from splinefit.curves.parametric import is_finite_point, normalize, to_point
from splinefit.errors import CurveUndefined, TangentUndefined

# Below this, 1 - c^2 is treated as parallel/antiparallel end tangents
DEGENERATE_THRESHOLD = 1e-8


def _sample_point(curve, t):
    p = to_point(curve.at(t))
    if not is_finite_point(p):
        raise CurveUndefined(t, p.tolist())
    return p


def _sample_tangent(curve, t):
    v = to_point(curve.tangent_at(t))
    if not is_finite_point(v):
        raise TangentUndefined(t, v.tolist())
    return v


def fit_cubic_bezier(curve, t0, t1):
    """
    Fit a single cubic Bezier to curve over [t0, t1].

    Solves for handle lengths s0, s1 along the unit end tangents u0, u1 so
    that B(1/2) equals the curve midpoint, via the 2x2 system with
    R = (4/3)(2*mid - p0 - p3) and c = u0.u1. When the tangents are
    (anti)parallel the system is singular and the handles fall back to the
    raw tangents scaled by (t1 - t0)/3.

    Returns:
        CubicBezierCurve matching the curve's endpoints exactly

    Raises:
        CurveUndefined: curve position at t0, t1 or the midpoint is not finite
        TangentUndefined: curve tangent at t0 or t1 is not finite
    """
    p0 = _sample_point(curve, t0)
    p3 = _sample_point(curve, t1)
    mid = _sample_point(curve, (t0 + t1) / 2)

    v0 = _sample_tangent(curve, t0)
    v1 = _sample_tangent(curve, t1)
    u0 = normalize(v0)
    u1 = normalize(v1)

    r = (2 * mid - p0 - p3) * (4.0 / 3.0)
    c = float(np.dot(u0, u1))
    denominator = 1 - c * c

    if abs(denominator) < DEGENERATE_THRESHOLD:
        scale = (t1 - t0) / 3
        return CubicBezierCurve(p0, p0 + v0 * scale, p3 - v1 * scale, p3)

    r_u0 = float(np.dot(r, u0))
    r_u1 = float(np.dot(r, u1))
    s0 = (r_u0 - c * r_u1) / denominator
    s1 = (c * r_u0 - r_u1) / denominator

    return CubicBezierCurve(p0, p0 + u0 * s0, p3 - u1 * s1, p3)


def max_error(bezier, curve, t0, t1, samples=10):
    """
    Maximum distance between a fitted Bezier and the curve on [t0, t1].

    Samples samples + 1 evenly spaced curve parameters; each is compared
    with the Bezier at the matching local parameter in [0, 1].
    """
    span = t1 - t0
    worst = 0.0

    for i in range(samples + 1):
        u = i / samples
        t = t0 + u * span
        fitted = bezier.at(u)
        target = to_point(curve.at(t))
        error = float(np.linalg.norm(fitted - target))
        if error > worst:
            worst = error

    return worst
