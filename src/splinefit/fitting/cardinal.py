"""
Cardinal and Catmull-Rom splines through explicit points.

Each stitch is a Hermite cubic whose end velocities come from the
neighbouring points scaled by the tension. The spline starts at the
builder's current position.
"""

from splinefit.curves.parametric import to_point
from splinefit.tracer import get_tracer, trace


@trace(label="cardinal_spline")
def cardinal_spline(builder, tension, *points):
    """
    Stitch Hermite cubics from the cursor through each of points.

    Interior velocities are tension * (next - previous). The velocities
    at the cursor and at the last point are 2 * tension times the
    adjacent chord.

    Returns:
        list of emitted Segments, empty when no points are given
    """
    if not points:
        return []

    points = [to_point(p) for p in points]
    segments = []

    prev = builder.current_position()
    current = points[0]
    last_velocity = (current - prev) * (2 * tension)

    for nxt in points[1:]:
        velocity = (nxt - prev) * tension
        segments.append(builder.hermite_curve(last_velocity, velocity, current))
        last_velocity = velocity
        prev = current
        current = nxt

    segments.append(builder.hermite_curve(last_velocity, (current - prev) * (2 * tension), current))

    get_tracer().event(f"Cardinal spline emitted {len(segments)} segments", tension=tension)
    return segments


def catmull_rom_spline(builder, *points):
    """Cardinal spline with tension 0.5."""
    return cardinal_spline(builder, 0.5, *points)
