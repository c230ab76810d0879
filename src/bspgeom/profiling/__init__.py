"""
bspgeom Profiling Package

Lightweight profiling markers (@profile decorator, perf_marker context manager)
used to time tree building, boolean merges and boundary extraction.

Quick usage:
    from bspgeom.profiling import profile, perf_marker, enable_profiling

    @profile
    def my_function():
        with perf_marker("my_section"):
            ...
"""

from .profile import (
    enable_profiling,
    is_profiling_enabled,
    reset_profile,
    get_profile_results,
    perf_marker,
    profile,
    _PROFILING_COMPILED_OUT,
)

__all__ = [
    'enable_profiling',
    'is_profiling_enabled',
    'reset_profile',
    'get_profile_results',
    'perf_marker',
    'profile',
    '_PROFILING_COMPILED_OUT',
]
