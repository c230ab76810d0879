"""
Tests for the bspgeom profiling module.
"""
import os
import subprocess
import sys
import time
from pathlib import Path

import pytest

from bspgeom.profiling import (
    enable_profiling,
    get_profile_results,
    is_profiling_enabled,
    perf_marker,
    profile,
    reset_profile,
)

_SRC_PATH = str(Path(__file__).resolve().parents[2] / "src")


def _run_python(args, extra_env=None):
    env = os.environ.copy()
    env["PYTHONPATH"] = _SRC_PATH + os.pathsep + env.get("PYTHONPATH", "")
    env.pop("BSPGEOM_NO_PROFILING", None)
    if extra_env:
        env.update(extra_env)
    return subprocess.run([sys.executable] + args, capture_output=True, text=True, env=env)


class TestProfilingCompiledOut:
    """Tests for the zero-overhead compile-out feature."""

    def test_normal_mode_not_compiled_out(self):
        """In normal mode (no -O flag), profiling should NOT be compiled out."""
        if os.environ.get("BSPGEOM_NO_PROFILING"):
            pytest.skip("profiling compiled out for this session")
        from bspgeom.profiling import _PROFILING_COMPILED_OUT
        assert _PROFILING_COMPILED_OUT is False

    def test_optimized_mode_compiled_out(self):
        """When running with python -O, profiling should be compiled out."""
        result = _run_python(
            ["-O", "-c",
             "from bspgeom.profiling import _PROFILING_COMPILED_OUT; "
             "print(_PROFILING_COMPILED_OUT)"])
        assert result.returncode == 0, f"Failed: {result.stderr}"
        assert "True" in result.stdout

    def test_env_var_compiles_out(self):
        """When BSPGEOM_NO_PROFILING=1, profiling should be compiled out."""
        result = _run_python(
            ["-c",
             "from bspgeom.profiling import _PROFILING_COMPILED_OUT; "
             "print(_PROFILING_COMPILED_OUT)"],
            {"BSPGEOM_NO_PROFILING": "1"})
        assert result.returncode == 0, f"Failed: {result.stderr}"
        assert "True" in result.stdout

    def test_compiled_out_mode_has_noop_functions(self):
        """When compiled out, all functions should be no-ops that don't error."""
        code = """
from bspgeom.profiling import (
    enable_profiling, reset_profile, get_profile_results, perf_marker, profile
)

enable_profiling(True)
reset_profile()
assert get_profile_results() == {}

with perf_marker("test"):
    pass

@profile
def my_func():
    return 42

@profile("custom_name")
def my_func2():
    return 43

assert my_func() == 42
assert my_func2() == 43
assert get_profile_results() == {}

print("OK")
"""
        result = _run_python(["-c", code], {"BSPGEOM_NO_PROFILING": "1"})
        assert result.returncode == 0, f"Failed: {result.stderr}"
        assert "OK" in result.stdout


class TestProfilingFunctionality:
    """Tests for actual profiling functionality."""

    def setup_method(self):
        reset_profile()
        enable_profiling(True)

    def teardown_method(self):
        enable_profiling(False)
        reset_profile()

    def test_perf_marker_records_timing(self):
        """Test that perf_marker records timing data."""
        with perf_marker("test_marker"):
            time.sleep(0.01)

        results = get_profile_results()

        assert "test_marker" in results
        assert results["test_marker"]["count"] == 1
        assert results["test_marker"]["total_ms"] >= 5

    def test_profile_decorator_records_timing(self):
        """Test that @profile decorator records timing data."""
        @profile
        def slow_function():
            time.sleep(0.01)
            return 42

        result = slow_function()
        results = get_profile_results()

        assert result == 42
        assert "slow_function" in results
        assert results["slow_function"]["count"] == 1
        assert results["slow_function"]["total_ms"] >= 5

    def test_profile_decorator_with_custom_name(self):
        """Test @profile decorator with custom name."""
        @profile("my_custom_name")
        def some_function():
            return 123

        some_function()
        results = get_profile_results()

        assert "my_custom_name" in results
        assert "some_function" not in results

    def test_nested_markers_track_hierarchy(self):
        """Test that nested markers track parent-child relationships."""
        with perf_marker("outer"):
            with perf_marker("inner"):
                pass

        results = get_profile_results()

        assert "outer" in results
        assert "inner" in results
        assert results["inner"]["parents"].get("outer", 0) == 1

    def test_multiple_calls_accumulate(self):
        """Test that multiple calls to same marker accumulate stats."""
        for _ in range(5):
            with perf_marker("repeated"):
                pass

        assert get_profile_results()["repeated"]["count"] == 5

    def test_mean_is_total_over_count(self):
        """Test the mean time is derived from the total and the count."""
        for _ in range(4):
            with perf_marker("averaged"):
                time.sleep(0.002)

        stats = get_profile_results()["averaged"]
        assert stats["count"] == 4
        assert stats["mean_ms"] == pytest.approx(stats["total_ms"] / 4, abs=0.01)

    def test_marker_open_across_reset_is_ignored(self):
        """Test a marker opened before a reset does not record on exit."""
        with perf_marker("interrupted"):
            reset_profile()

        assert get_profile_results() == {}

    def test_reset_clears_data(self):
        """Test that reset_profile clears all data."""
        with perf_marker("before_reset"):
            pass

        assert "before_reset" in get_profile_results()
        reset_profile()
        assert get_profile_results() == {}

    def test_disabled_markers_record_nothing(self):
        """Test that markers are silent while profiling is disabled."""
        enable_profiling(False)
        assert not is_profiling_enabled()

        with perf_marker("silent"):
            pass

        assert get_profile_results() == {}

    def test_region_operations_are_profiled(self):
        """Test that boolean operations and builders report their markers."""
        from bspgeom.euclidean.twod.polygons_set import PolygonsSet
        from bspgeom.partitioning.region_factory import RegionFactory

        square = PolygonsSet.from_vertices(1.0e-10, (0, 0), (1, 0), (1, 1), (0, 1))
        RegionFactory().union(square, PolygonsSet.box(0.5, 2, 0, 1))

        results = get_profile_results()
        assert "from_vertices" in results
        assert "union" in results
