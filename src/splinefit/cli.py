"""
Command-line interface for splinefit.

Provides commands for fitting curves, listing critical parameters,
stitching cardinal splines through points and writing the default
configuration.
"""

import argparse
import math
import sys

from splinefit.config import load_config, save_default_config
from splinefit.models import FitStrategy
from splinefit.tracer import configure_tracer, get_tracer


def _add_curve_arguments(parser):
    parser.add_argument(
        "--curve",
        default="circle",
        choices=["circle", "ellipse", "superellipse"],
        help="Curve to fit",
    )
    parser.add_argument("--radius", type=float, default=10.0, help="Circle radius")
    parser.add_argument("--a", type=float, default=20.0, help="Semi-axis along x")
    parser.add_argument("--b", type=float, default=10.0, help="Semi-axis along y")
    parser.add_argument("--n", type=float, default=2.0, help="Superellipse exponent")
    parser.add_argument("--tilt", type=float, default=0.0, help="Ellipse tilt in radians")
    parser.add_argument("--t0", type=float, default=0.0, help="Interval start")
    parser.add_argument("--t1", type=float, default=2 * math.pi, help="Interval end")


def _add_trace_arguments(parser):
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    parser.add_argument(
        "--trace-level",
        default="INFO",
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level",
    )
    parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs",
    )
    parser.add_argument(
        "--trace-json",
        action="store_true",
        help="Enable JSON trace output",
    )


def _curve_params(args):
    return {"radius": args.radius, "a": args.a, "b": args.b, "n": args.n, "tilt": args.tilt}


def _parse_point(text):
    try:
        x, y = (float(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a point as x,y, got {text!r}")
    return (x, y)


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="splinefit",
        description="splinefit: approximate parametric curves with cubic Bezier splines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Fit command
    fit_parser = subparsers.add_parser("fit", help="Fit a curve and write SVG/JSON")
    _add_curve_arguments(fit_parser)
    fit_parser.add_argument(
        "--strategy", "-s",
        default=None,
        choices=[s.value for s in FitStrategy],
        help="Assembly strategy (default from config)",
    )
    fit_parser.add_argument("--tolerance", type=float, default=None, help="Subdivision tolerance")
    fit_parser.add_argument("--steps", type=int, default=None, help="Segment count for the steps strategy")
    fit_parser.add_argument(
        "--params",
        type=float,
        nargs="+",
        default=None,
        help="Breakpoints for the params strategy",
    )
    fit_parser.add_argument(
        "--out", "-o",
        required=True,
        help="Output directory",
    )
    fit_parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    _add_trace_arguments(fit_parser)

    # Critical command
    critical_parser = subparsers.add_parser("critical", help="Print critical parameters of a curve")
    _add_curve_arguments(critical_parser)
    _add_trace_arguments(critical_parser)

    # Stitch command
    stitch_parser = subparsers.add_parser("stitch", help="Stitch a cardinal spline through points")
    stitch_parser.add_argument(
        "points",
        type=_parse_point,
        nargs="+",
        help="Points as x,y; the spline starts at the first",
    )
    stitch_parser.add_argument("--tension", type=float, default=None, help="Tension (default from config)")
    stitch_parser.add_argument(
        "--out", "-o",
        required=True,
        help="Output directory",
    )
    stitch_parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    _add_trace_arguments(stitch_parser)

    # Init config command
    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="splinefit_config.yaml",
        help="Output path for config file",
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "fit":
        return handle_fit(args)
    elif args.command == "critical":
        return handle_critical(args)
    elif args.command == "stitch":
        return handle_stitch(args)
    elif args.command == "init-config":
        return handle_init_config(args)

    return 0


def _configure_tracing(args):
    configure_tracer(
        enabled=args.trace,
        level=args.trace_level,
        file_path=args.trace_file,
        json_output=args.trace_json,
    )


def handle_fit(args):
    """Handle the fit command."""
    _configure_tracing(args)
    tracer = get_tracer()

    config = load_config(args.config)
    if args.tolerance is not None:
        config.fit.tolerance = args.tolerance
    if args.steps is not None:
        config.fit.steps = args.steps

    try:
        from splinefit.pipeline import run_pipeline

        with tracer.span("cli_fit", module="cli"):
            result = run_pipeline(
                args.curve, args.t0, args.t1, args.out,
                config=config,
                strategy=args.strategy,
                params=args.params,
                **_curve_params(args),
            )

        print(f"\nFit completed successfully.")
        print(f"  Curve: {result.curve}")
        print(f"  Strategy: {result.strategy.value}")
        print(f"  Segments: {result.segment_count}")
        print(f"  Max error: {result.max_error:.6g}")
        print(f"\nOutputs saved to: {args.out}/")
        print(f"  - fit.svg")
        print(f"  - fit.json")

        return 0

    except Exception as e:
        tracer.event(f"Fit failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1


def handle_critical(args):
    """Handle the critical command."""
    _configure_tracing(args)
    tracer = get_tracer()

    try:
        from splinefit.fitting.roots import find_critical_params
        from splinefit.pipeline import make_curve

        curve = make_curve(args.curve, **_curve_params(args))
        with tracer.span("cli_critical", module="cli"):
            params = find_critical_params(curve, args.t0, args.t1)

        for t in params:
            print(f"{t:.8f}")
        return 0

    except Exception as e:
        tracer.event(f"Critical search failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1


def handle_stitch(args):
    """Handle the stitch command."""
    _configure_tracing(args)
    tracer = get_tracer()

    try:
        from splinefit.pipeline import run_stitch

        config = load_config(args.config)
        with tracer.span("cli_stitch", module="cli"):
            segments = run_stitch(args.points, args.out, config=config, tension=args.tension)

        tension = args.tension if args.tension is not None else config.cardinal.tension
        print(f"\nStitched {len(segments)} segments (tension {tension:g}).")
        print(f"\nOutputs saved to: {args.out}/")
        print(f"  - stitch.svg")

        return 0

    except Exception as e:
        tracer.event(f"Stitch failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
