"""
Spline assembly strategies for splinefit.

Each strategy fits cubic Beziers over parts of a parameter interval and
emits them into a PathBuilder, returning the emitted segments in order.

Failures propagate immediately. Segments emitted before a failure stay in
the builder; callers that need all-or-nothing behaviour should fit into a
scratch builder first.
"""

from splinefit.curves.arcs import arc_to_bezier, resolve_arc
from splinefit.errors import InsufficientBreakpoints, InvalidStepCount, SubdivisionLimitExceeded
from splinefit.fitting.bezier_fit import fit_cubic_bezier, max_error
from splinefit.fitting.roots import find_critical_params
from splinefit.tracer import get_tracer, trace

DEFAULT_TOLERANCE = 0.25
DEFAULT_MAX_DEPTH = 32
DEFAULT_ERROR_SAMPLES = 10


def _emit(builder, curve, t0, t1):
    bezier = fit_cubic_bezier(curve, t0, t1)
    return builder.emit_bezier(bezier, t0=t0, t1=t1)


@trace(label="fit_spline_by_subdivision")
def fit_spline_by_subdivision(builder, curve, t0, t1, tolerance=DEFAULT_TOLERANCE,
                              max_depth=DEFAULT_MAX_DEPTH, samples=DEFAULT_ERROR_SAMPLES):
    """
    Fit curve on [t0, t1] by recursive bisection until each piece is within tolerance.

    Args:
        builder: PathBuilder receiving the segments
        curve: ParametricCurve to approximate
        t0, t1: parameter interval
        tolerance: maximum allowed positional error per segment
        max_depth: maximum number of nested bisections
        samples: error samples per segment

    Returns:
        list of emitted Segments

    Raises:
        SubdivisionLimitExceeded: a piece still misses tolerance at max_depth
    """
    tracer = get_tracer()
    segments = []
    _subdivide(builder, curve, t0, t1, tolerance, max_depth, samples, 0, segments)
    tracer.event(f"Subdivision emitted {len(segments)} segments", tolerance=tolerance)
    return segments


def _subdivide(builder, curve, t0, t1, tolerance, max_depth, samples, depth, out):
    """Recursive worker for fit_spline_by_subdivision."""
    bezier = fit_cubic_bezier(curve, t0, t1)
    error = max_error(bezier, curve, t0, t1, samples)

    if error < tolerance:
        out.append(builder.emit_bezier(bezier, t0=t0, t1=t1))
        return

    if depth >= max_depth:
        raise SubdivisionLimitExceeded(t0, t1, max_depth, error, tolerance)

    tm = (t0 + t1) / 2
    _subdivide(builder, curve, t0, tm, tolerance, max_depth, samples, depth + 1, out)
    _subdivide(builder, curve, tm, t1, tolerance, max_depth, samples, depth + 1, out)


@trace(label="fit_spline_in_steps")
def fit_spline_in_steps(builder, curve, t0, t1, steps):
    """
    Fit curve on [t0, t1] with steps equal-length parameter intervals.

    Segments are emitted regardless of their error.
    """
    if steps < 1:
        raise InvalidStepCount(steps)

    tracer = get_tracer()
    span = t1 - t0
    params = [t0 + i * span / steps for i in range(steps)] + [t1]
    segments = [_emit(builder, curve, a, b) for a, b in zip(params, params[1:])]
    tracer.event(f"Step fit emitted {len(segments)} segments")
    return segments


@trace(label="fit_spline_at_params")
def fit_spline_at_params(builder, curve, *params):
    """
    Fit one segment between each pair of consecutive breakpoints.

    Raises:
        InsufficientBreakpoints: fewer than two breakpoints given
    """
    if len(params) < 2:
        raise InsufficientBreakpoints(len(params))

    segments = [_emit(builder, curve, a, b) for a, b in zip(params, params[1:])]
    get_tracer().event(f"Breakpoint fit emitted {len(segments)} segments")
    return segments


@trace(label="fit_spline_to")
def fit_spline_to(builder, curve, t0, t1, critical=None):
    """
    Fit segments between the curve's critical parameters on [t0, t1].

    With fewer than two critical parameters the whole interval is fitted
    as one segment. Otherwise the segments span the critical set exactly
    as found; t0 and t1 are not added, so the spline can start after t0
    and end before t1.

    Args:
        critical: precomputed find_critical_params(curve, t0, t1), searched
            for when None
    """
    if critical is None:
        critical = find_critical_params(curve, t0, t1)
    if len(critical) < 2:
        return fit_spline_at_params(builder, curve, t0, t1)
    return fit_spline_at_params(builder, curve, *critical)


@trace(label="fit_arc")
def fit_arc(builder, spec):
    """
    Emit one closed-form cubic for an arc starting at the builder cursor.

    Args:
        builder: PathBuilder receiving the segment
        spec: ByAngles or ByArc

    Returns:
        list with the single emitted Segment
    """
    arc = resolve_arc(spec)
    bezier = arc_to_bezier(builder.current_position(), arc)
    return [builder.emit_cubic(bezier.control1, bezier.control2, bezier.end)]
