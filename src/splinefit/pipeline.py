"""
Fit orchestration for splinefit.

Builds a curve, runs the configured assembly strategy into a fresh path
builder, measures the result and writes SVG/JSON outputs. Cardinal
splines through explicit points are stitched with the configured tension.
"""

import os

from splinefit.builder.path_builder import PathBuilder
from splinefit.config import load_config
from splinefit.curves.shapes import Circle, Ellipse, Superellipse
from splinefit.export.svg_emit import compute_segments_bbox, emit_svg_document, segments_to_path_data
from splinefit.fitting.assemble import (
    fit_spline_at_params, fit_spline_by_subdivision, fit_spline_in_steps, fit_spline_to,
)
from splinefit.fitting.bezier_fit import max_error
from splinefit.fitting.cardinal import cardinal_spline
from splinefit.fitting.roots import find_critical_params
from splinefit.io.save_artifacts import ensure_dir, save_json, save_svg
from splinefit.models import FitResult, FitStrategy, SegmentRecord, generate_fit_id
from splinefit.tracer import get_tracer, trace

CURVES = {
    "circle": lambda radius=10.0, center=(0.0, 0.0), **_: Circle(radius, center),
    "ellipse": lambda a=20.0, b=10.0, center=(0.0, 0.0), tilt=0.0, **_: Ellipse(a, b, center, tilt),
    "superellipse": lambda a=10.0, b=10.0, n=2.0, **_: Superellipse(a, b, n),
}


def make_curve(name, **params):
    """Build one of the named curves; unused params are ignored."""
    if name not in CURVES:
        raise ValueError(f"Unknown curve {name!r}; expected one of {sorted(CURVES)}")
    return CURVES[name](**params)


def _run_strategy(builder, curve, t0, t1, strategy, fit_config, params, critical):
    if strategy == FitStrategy.SUBDIVISION:
        return fit_spline_by_subdivision(
            builder, curve, t0, t1,
            tolerance=fit_config.tolerance,
            max_depth=fit_config.max_depth,
            samples=fit_config.error_samples,
        )
    if strategy == FitStrategy.STEPS:
        return fit_spline_in_steps(builder, curve, t0, t1, fit_config.steps)
    if strategy == FitStrategy.PARAMS:
        return fit_spline_at_params(builder, curve, *(params if params is not None else (t0, t1)))
    return fit_spline_to(builder, curve, t0, t1, critical=critical)


@trace(label="run_fit", arg_names=["strategy"])
def run_fit(curve, t0, t1, config=None, strategy=None, params=None, curve_name=None, builder=None):
    """
    Fit curve on [t0, t1] and describe the result.

    Args:
        curve: ParametricCurve to fit
        t0, t1: parameter interval
        config: SplineFitConfig (defaults when None)
        strategy: FitStrategy or its value; overrides config.fit.strategy
        params: breakpoints for the "params" strategy
        curve_name: label stored in the result
        builder: PathBuilder to emit into; a new one positioned at
            curve.at(t0) when None

    Returns:
        (FitResult, list of Segments)
    """
    tracer = get_tracer()

    if config is None:
        config = load_config()
    strategy = FitStrategy(strategy or config.fit.strategy)
    curve_name = curve_name or type(curve).__name__

    if builder is None:
        builder = PathBuilder(curve.at(t0))

    critical = find_critical_params(curve, t0, t1) if strategy == FitStrategy.CRITICAL else []
    segments = _run_strategy(builder, curve, t0, t1, strategy, config.fit, params, critical)

    records = []
    worst = 0.0
    for index, seg in enumerate(segments):
        error = None
        if seg.source is not None:
            error = max_error(seg.source, curve, seg.t0, seg.t1, config.fit.error_samples)
            worst = max(worst, error)
        records.append(SegmentRecord(
            index=index,
            bezier=seg.bezier.to_model(),
            source=seg.source.to_model() if seg.source is not None else None,
            t0=seg.t0,
            t1=seg.t1,
            error=error,
        ))

    result = FitResult(
        fit_id=generate_fit_id(curve_name, strategy.value, t0, t1),
        curve=curve_name,
        strategy=strategy,
        t0=t0,
        t1=t1,
        tolerance=config.fit.tolerance if strategy == FitStrategy.SUBDIVISION else None,
        critical_params=critical,
        segments=records,
        max_error=worst,
        path_data=segments_to_path_data(segments, config.output.precision),
        bbox=compute_segments_bbox(segments),
    )

    tracer.event(f"Fit complete: {len(segments)} segments, max error {worst:.4g}")
    return result, segments


@trace(label="run_pipeline")
def run_pipeline(curve_name, t0, t1, out_dir, config=None, config_path=None,
                 strategy=None, params=None, **curve_params):
    """
    Build a named curve, fit it and write fit.svg and fit.json to out_dir.

    Returns:
        FitResult
    """
    if config is None:
        config = load_config(config_path)

    curve = make_curve(curve_name, **curve_params)
    result, segments = run_fit(
        curve, t0, t1, config=config, strategy=strategy, params=params, curve_name=curve_name,
    )

    ensure_dir(out_dir)
    _write_svg(segments, os.path.join(out_dir, "fit.svg"), config.output)
    save_json(result, os.path.join(out_dir, "fit.json"))

    return result


def _write_svg(segments, path, output_config):
    dwg = emit_svg_document(
        segments,
        stroke_width=output_config.stroke_width,
        stroke_color=output_config.stroke_color,
        margin=output_config.margin,
        precision=output_config.precision,
    )
    save_svg(dwg, path)


@trace(label="run_stitch", arg_names=["tension"])
def run_stitch(points, out_dir=None, config=None, config_path=None, tension=None):
    """
    Stitch a cardinal spline through points, starting at the first one.

    Args:
        points: sequence of (x, y) points, at least one
        out_dir: directory for stitch.svg; nothing is written when None
        config: SplineFitConfig (loaded from config_path when None)
        tension: overrides config.cardinal.tension

    Returns:
        list of emitted Segments
    """
    if not points:
        raise ValueError("At least one point is required to stitch a spline")

    if config is None:
        config = load_config(config_path)
    if tension is None:
        tension = config.cardinal.tension

    builder = PathBuilder(points[0])
    segments = cardinal_spline(builder, tension, *points[1:])

    if out_dir is not None:
        ensure_dir(out_dir)
        _write_svg(segments, os.path.join(out_dir, "stitch.svg"), config.output)

    return segments
