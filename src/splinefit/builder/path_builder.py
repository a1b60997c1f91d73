"""
Path builder that collects emitted cubic segments.

The builder keeps a single drawing cursor. Each emitted segment starts at
the cursor and moves it to the segment's end. Emission is append-only;
a builder instance must not be shared by concurrent fitting calls.
"""

from dataclasses import dataclass
from typing import Optional

from splinefit.curves.bezier import CubicBezierCurve
from splinefit.curves.parametric import to_point


@dataclass(frozen=True)
class Segment:
    """Handle for one emitted cubic segment."""
    bezier: CubicBezierCurve
    source: Optional[CubicBezierCurve] = None
    t0: Optional[float] = None
    t1: Optional[float] = None

    @property
    def start_point(self):
        return self.bezier.start

    @property
    def terminal_point(self):
        return self.bezier.end

    @property
    def start_velocity(self):
        return self.bezier.start_velocity

    @property
    def end_velocity(self):
        return self.bezier.end_velocity


class PathBuilder:
    """
    Accumulates cubic segments from a starting point.

    Args:
        start: initial cursor position
    """

    def __init__(self, start=(0.0, 0.0)):
        self._start = to_point(start)
        self._cursor = self._start
        self._subpaths = [(self._start, [])]

    @property
    def segments(self):
        """All emitted segments in emission order."""
        return [seg for _, segs in self._subpaths for seg in segs]

    @property
    def subpaths(self):
        return [(start.copy(), list(segs)) for start, segs in self._subpaths]

    def current_position(self):
        return self._cursor.copy()

    def move_to(self, point):
        """Start a new subpath at point."""
        self._cursor = to_point(point)
        if self._subpaths[-1][1]:
            self._subpaths.append((self._cursor, []))
        else:
            self._subpaths[-1] = (self._cursor, [])
        return self

    def emit_cubic(self, c1, c2, end, source=None, t0=None, t1=None):
        """Append a cubic from the cursor through c1, c2 to end."""
        bezier = CubicBezierCurve(self._cursor, c1, c2, end)
        segment = Segment(bezier=bezier, source=source, t0=t0, t1=t1)
        self._subpaths[-1][1].append(segment)
        self._cursor = bezier.end
        return segment

    def emit_bezier(self, bezier, t0=None, t1=None):
        """
        Append a fitted Bezier, translated so it starts at the cursor.

        The untranslated curve is kept as the segment's source.
        """
        offset = self._cursor - bezier.start
        placed = bezier.translated(offset)
        return self.emit_cubic(placed.control1, placed.control2, placed.end,
                               source=bezier, t0=t0, t1=t1)

    def hermite_curve(self, v_start, v_end, end):
        """Append the cubic with the given end velocities, ending at end."""
        start = self._cursor
        end = to_point(end)
        c1 = start + to_point(v_start) / 3
        c2 = end - to_point(v_end) / 3
        return self.emit_cubic(c1, c2, end)

    def to_path_data(self, precision=2):
        """Serialize the path as SVG path data."""
        from splinefit.export.svg_emit import subpaths_to_path_data
        return subpaths_to_path_data(self._subpaths, precision=precision)
