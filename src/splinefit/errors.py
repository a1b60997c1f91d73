"""
Error types raised by the splinefit fitting core.

All failures are immediate and synchronous. None of them are retried.
"""


class SplineFitError(ValueError):
    """Base class for all fitting failures."""


class InvalidDomain(SplineFitError):
    """Root finder bounds are not finite."""

    def __init__(self, t_start, t_end):
        super().__init__(f"Root search bounds must be finite, got [{t_start}, {t_end}]")
        self.t_start = t_start
        self.t_end = t_end


class CurveUndefined(SplineFitError):
    """The curve produced a non-finite position while fitting."""

    def __init__(self, t, point):
        super().__init__(f"Curve position is not finite at t={t}: {point}")
        self.t = t
        self.point = point


class TangentUndefined(SplineFitError):
    """The curve produced a non-finite tangent while fitting."""

    def __init__(self, t, tangent):
        super().__init__(f"Curve tangent is not finite at t={t}: {tangent}")
        self.t = t
        self.tangent = tangent


class InsufficientBreakpoints(SplineFitError):
    """Fewer than two breakpoints were given to a breakpoint fit."""

    def __init__(self, count):
        super().__init__(f"At least 2 breakpoints are required, got {count}")
        self.count = count


class InvalidStepCount(SplineFitError):
    """A step fit was asked for fewer than one step."""

    def __init__(self, steps):
        super().__init__(f"Step count must be at least 1, got {steps}")
        self.steps = steps


class SubdivisionLimitExceeded(SplineFitError):
    """Error-bounded subdivision went deeper than its depth limit."""

    def __init__(self, t0, t1, max_depth, error, tolerance):
        super().__init__(
            f"Subdivision exceeded max_depth={max_depth} on [{t0}, {t1}] "
            f"(error {error:.3g} >= tolerance {tolerance:.3g})"
        )
        self.t0 = t0
        self.t1 = t1
        self.max_depth = max_depth
        self.error = error
        self.tolerance = tolerance
