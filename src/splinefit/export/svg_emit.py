"""
SVG emission for splinefit.

Serializes emitted cubic segments as SVG path data and wraps them in an
SVG document.
"""

import svgwrite

from splinefit.models import compute_bbox
from splinefit.tracer import get_tracer, trace


def _fmt(p, precision):
    return f"{p[0]:.{precision}f} {p[1]:.{precision}f}"


def segments_to_path_data(segments, precision=2):
    """
    Convert a list of Segments to SVG path d attribute.

    Assumes segments are connected (end of one = start of next).
    """
    if not segments:
        return ""

    parts = [f"M {_fmt(segments[0].start_point, precision)}"]
    for seg in segments:
        bez = seg.bezier
        parts.append(
            f"C {_fmt(bez.control1, precision)} {_fmt(bez.control2, precision)} {_fmt(bez.end, precision)}"
        )

    return " ".join(parts)


def subpaths_to_path_data(subpaths, precision=2):
    """Convert (start, segments) subpaths to path data, one M per subpath."""
    parts = []
    for start, segments in subpaths:
        if not segments:
            continue
        parts.append(segments_to_path_data(segments, precision))
    return " ".join(parts)


def compute_segments_bbox(segments):
    """Bounding box of all control points of the segments."""
    points = []
    for seg in segments:
        points.extend(seg.bezier.points.tolist())
    return compute_bbox(points)


@trace(label="emit_svg_document")
def emit_svg_document(segments, stroke_width=1.0, stroke_color="black", margin=10.0, precision=2):
    """
    Create an SVG document containing the segments as one path.

    The view box is the control-point bounding box grown by margin.

    Returns:
        svgwrite.Drawing object
    """
    tracer = get_tracer()

    min_x, min_y, max_x, max_y = compute_segments_bbox(segments)
    width = max(max_x - min_x, 0.0) + 2 * margin
    height = max(max_y - min_y, 0.0) + 2 * margin

    dwg = svgwrite.Drawing(size=(f"{width:.{precision}f}px", f"{height:.{precision}f}px"))
    dwg.viewbox(min_x - margin, min_y - margin, width, height)

    group = dwg.g(id="spline", fill="none", stroke=stroke_color, stroke_width=stroke_width)
    path_data = segments_to_path_data(segments, precision)
    if path_data:
        group.add(dwg.path(d=path_data, id="fitted"))
    dwg.add(group)

    tracer.event(f"SVG emitted with {len(segments)} segments")

    return dwg
