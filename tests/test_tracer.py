"""Tests for the tracer module."""

import json
import math

import numpy as np
import pytest


class TestSummarize:
    """Tests for object summarization."""

    def test_numpy_array_summary(self):
        """Test that numpy arrays are summarized with shape and type."""
        from splinefit.tracer import summarize

        arr = np.zeros((100, 2), dtype=np.float64)
        summary = summarize(arr)

        assert "ndarray" in summary
        assert "100x2" in summary
        assert "float64" in summary

    def test_point_summary(self):
        """Test that 2D points print their coordinates."""
        from splinefit.tracer import summarize

        assert summarize(np.array([1.5, -2.0])) == "(1.5, -2)"

    def test_summary_capped_length(self):
        """Test that summary never exceeds max length."""
        from splinefit.tracer import summarize

        large_dict = {f"key_{i}": f"value_{i}" for i in range(100)}
        summary = summarize(large_dict, max_len=20)

        assert len(summary) <= 20

    def test_list_summary(self):
        """Test list summarization."""
        from splinefit.tracer import summarize

        summary = summarize([1, 2, 3, 4, 5])

        assert "list" in summary
        assert "len=5" in summary

    def test_string_summary(self):
        """Test long string summarization."""
        from splinefit.tracer import summarize

        summary = summarize("a" * 1000)

        assert "str" in summary
        assert "len=1000" in summary
        assert len(summary) <= 200

    def test_none_summary(self):
        """Test None summarization."""
        from splinefit.tracer import summarize

        assert summarize(None) == "None"

    def test_pydantic_model_summary(self):
        """Test Pydantic model summarization."""
        from splinefit.models import CubicBezier
        from splinefit.tracer import summarize

        model = CubicBezier(p0=[0, 0], p1=[1, 1], p2=[2, 1], p3=[3, 0])
        summary = summarize(model)

        assert "CubicBezier" in summary

    def test_curve_summaries(self):
        """Test curves and segments summarize through their repr."""
        from splinefit.builder.path_builder import PathBuilder
        from splinefit.curves.shapes import Circle
        from splinefit.tracer import summarize

        segment = PathBuilder().emit_cubic((1, 0), (2, 0), (3, 4))

        assert summarize(Circle(2)).startswith("Circle(radius=2.0")
        assert summarize(segment) == "Segment(end=(3, 4))"
        assert summarize(segment.bezier).startswith("CubicBezierCurve(")

    def test_float_summary(self):
        """Test floats are shortened."""
        from splinefit.tracer import summarize

        assert summarize(math.pi) == "3.14159"


class TestTracerSpan:
    """Tests for tracer span functionality."""

    def test_span_nesting(self, capsys):
        """Test that spans produce proper indentation."""
        from splinefit.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="INFO")
        tracer = get_tracer()

        with tracer.span("outer", module="test"):
            with tracer.span("inner", module="test"):
                tracer.event("inside")

        captured = capsys.readouterr()
        lines = captured.err.strip().split("\n")

        # start/end for both spans plus the event
        assert len(lines) == 5
        assert "    test:inner  inside" in lines[2]

        configure_tracer(enabled=False)

    def test_tracer_disabled_no_output(self, capsys):
        """Test that disabled tracer produces no output."""
        from splinefit.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=False)
        tracer = get_tracer()

        with tracer.span("test", module="test"):
            tracer.event("should not appear")

        captured = capsys.readouterr()
        assert captured.err == ""

    def test_level_filtering(self, capsys):
        """Test DEBUG events are dropped at INFO level."""
        from splinefit.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="INFO")
        get_tracer().event("hidden", level="DEBUG")
        get_tracer().event("shown", level="WARN")

        captured = capsys.readouterr()
        assert "hidden" not in captured.err
        assert "shown" in captured.err

        configure_tracer(enabled=False)

    def test_json_output_to_file(self, temp_dir, capsys):
        """Test JSON lines are mirrored to the trace file."""
        import os

        from splinefit.tracer import configure_tracer, get_tracer

        path = os.path.join(temp_dir, "trace.jsonl")
        configure_tracer(enabled=True, level="DEBUG", file_path=path, json_output=True)

        get_tracer().event("fitted", segments=3)
        configure_tracer(enabled=False)

        with open(path, "r", encoding="utf-8") as f:
            record = json.loads(f.readline())

        assert record["message"] == "fitted segments=3"
        assert record["meta"] == {"segments": "3"}
        assert record["level"] == "INFO"

    def test_span_logs_failure(self, capsys):
        """Test exceptions inside a span are logged and re-raised."""
        from splinefit.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="INFO")

        with pytest.raises(ValueError):
            with get_tracer().span("boom", module="test"):
                raise ValueError("bad interval")

        captured = capsys.readouterr()
        assert "ERROR" in captured.err
        assert "bad interval" in captured.err

        configure_tracer(enabled=False)


class TestTraceDecorator:
    """Tests for the @trace decorator."""

    def test_decorator_runs_function(self):
        """Test that decorated function executes normally."""
        from splinefit.tracer import configure_tracer, trace

        configure_tracer(enabled=False)

        @trace(label="test_func")
        def my_func(x):
            return x * 2

        assert my_func(5) == 10

    def test_decorator_with_exception(self):
        """Test that decorator handles exceptions properly."""
        from splinefit.tracer import configure_tracer, trace

        configure_tracer(enabled=False)

        @trace(label="failing_func")
        def failing_func():
            raise ValueError("test error")

        with pytest.raises(ValueError):
            failing_func()

    def test_decorated_fit_traces(self, capsys, circle, circle_builder):
        """Test fitting functions emit spans when tracing is on."""
        from splinefit.fitting.assemble import fit_spline_in_steps
        from splinefit.tracer import configure_tracer

        configure_tracer(enabled=True, level="INFO")
        fit_spline_in_steps(circle_builder, circle, 0.0, math.pi, 2)
        configure_tracer(enabled=False)

        captured = capsys.readouterr()
        assert "assemble:fit_spline_in_steps" in captured.err
        assert "Step fit emitted 2 segments" in captured.err
