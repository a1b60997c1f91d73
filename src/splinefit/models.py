"""
Pydantic data models for splinefit results.

Fitted splines are reported through these validated records so they can be
written to JSON and reloaded. Content-based ID generation keeps outputs
deterministic.
"""

import hashlib
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FitStrategy(str, Enum):
    """Spline assembly strategies."""
    SUBDIVISION = "subdivision"
    STEPS = "steps"
    PARAMS = "params"
    CRITICAL = "critical"


class CubicBezier(BaseModel):
    """A single cubic Bezier curve segment."""
    p0: List[float] = Field(..., min_length=2, max_length=2)  # start point
    p1: List[float] = Field(..., min_length=2, max_length=2)  # control point 1
    p2: List[float] = Field(..., min_length=2, max_length=2)  # control point 2
    p3: List[float] = Field(..., min_length=2, max_length=2)  # end point

    model_config = ConfigDict(frozen=True)


class SegmentRecord(BaseModel):
    """One emitted segment as placed by the path builder."""
    index: int = Field(..., ge=0)
    bezier: CubicBezier
    source: Optional[CubicBezier] = None  # fitted curve before cursor translation
    t0: Optional[float] = None
    t1: Optional[float] = None
    error: Optional[float] = Field(default=None, ge=0.0)

    model_config = ConfigDict(extra="forbid")


class FitResult(BaseModel):
    """Complete result of one fitting run."""
    fit_id: str
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    curve: str
    strategy: FitStrategy
    t0: float
    t1: float
    tolerance: Optional[float] = None
    critical_params: List[float] = Field(default_factory=list)
    segments: List[SegmentRecord] = Field(default_factory=list)
    max_error: float = Field(default=0.0, ge=0.0)
    path_data: str = ""
    bbox: List[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0, 0.0])

    model_config = ConfigDict(extra="forbid")

    @property
    def segment_count(self):
        return len(self.segments)


def generate_fit_id(curve_name, strategy, t0, t1, round_digits=6):
    """
    Generate deterministic fit ID from the curve name and interval.

    Rounds the interval to avoid floating point instability.
    """
    data = f"{curve_name}:{strategy}:{round(t0, round_digits)}:{round(t1, round_digits)}"
    h = hashlib.sha256(data.encode()).hexdigest()[:12]
    return f"fit_{h}"


def compute_bbox(points):
    """
    Compute bounding box from a list of [x, y] points.

    Returns [min_x, min_y, max_x, max_y].
    """
    if not points:
        return [0.0, 0.0, 0.0, 0.0]

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return [min(xs), min(ys), max(xs), max(ys)]
