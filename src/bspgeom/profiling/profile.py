"""
Timing markers for tree building, boolean merges and boundary extraction.

Usage:
    from bspgeom.profiling import profile, perf_marker, enable_profiling

    @profile
    def union(...):
        ...

    with perf_marker("stats"):
        ...

    enable_profiling(True)
    ...
    get_profile_results()
    # {'union': {'count': 1, 'total_ms': 0.8, 'mean_ms': 0.8, 'parents': {'combine': 1}}}

Markers only record while profiling is enabled. They are compiled out
(decorators return the undecorated function, markers are a shared no-op)
when BSPGEOM_NO_PROFILING=1 is set or Python runs with -O. Both are read
at import time.
"""

import functools
import os
import time
from typing import Any, Callable, Dict, List, Optional, Union

_PROFILING_COMPILED_OUT = (
    os.environ.get('BSPGEOM_NO_PROFILING', '').lower() in ('1', 'true', 'yes')
    or not __debug__
)

_perf = time.perf_counter


class _NoOpMarker:
    __slots__ = ()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


_NOOP_MARKER = _NoOpMarker()


class _Recorder:
    """
    Aggregates marker timings as markers close.

    The stack holds the names of the open markers so each closing marker
    can credit its innermost enclosing one as parent.
    """

    def __init__(self):
        self.enabled = False
        self.stack: List[str] = []
        self.stats: Dict[str, Dict[str, Any]] = {}

    def clear(self) -> None:
        self.stack.clear()
        self.stats.clear()

    def open(self, name: str) -> None:
        self.stack.append(name)

    def close(self, name: str, elapsed: float) -> None:
        if not self.stack or self.stack[-1] != name:
            # opened before a reset or while disabled
            return
        self.stack.pop()

        entry = self.stats.get(name)
        if entry is None:
            entry = self.stats[name] = {'count': 0, 'total_ms': 0.0, 'parents': {}}
        entry['count'] += 1
        entry['total_ms'] += elapsed * 1000
        if self.stack:
            parent = self.stack[-1]
            entry['parents'][parent] = entry['parents'].get(parent, 0) + 1

    def results(self) -> Dict[str, Dict[str, Any]]:
        results = {}
        for name, entry in self.stats.items():
            results[name] = {
                'count': entry['count'],
                'total_ms': round(entry['total_ms'], 3),
                'mean_ms': round(entry['total_ms'] / entry['count'], 3),
                'parents': dict(entry['parents']),
            }
        return results


_recorder = _Recorder()


class _Marker:
    __slots__ = ('name', '_start')

    def __init__(self, name: str):
        self.name = name
        self._start = None

    def __enter__(self):
        if _recorder.enabled:
            _recorder.open(self.name)
            self._start = _perf()
        return self

    def __exit__(self, *args):
        if self._start is not None:
            _recorder.close(self.name, _perf() - self._start)
            self._start = None
        return False


def enable_profiling(enabled: bool = True) -> None:
    """Turn recording on or off (no effect when compiled out)."""
    if not _PROFILING_COMPILED_OUT:
        _recorder.enabled = enabled


def is_profiling_enabled() -> bool:
    return _recorder.enabled


def reset_profile() -> None:
    """Forget every recorded timing."""
    _recorder.clear()


def get_profile_results() -> Dict[str, Dict[str, Any]]:
    """
    Timings recorded since the last reset.

    Returns:
        Dict mapping marker names to 'count', 'total_ms', 'mean_ms' and
        'parents' (enclosing marker name to number of calls)
    """
    return _recorder.results()


def perf_marker(name: Optional[str] = None):
    """Context manager timing the enclosed block under name."""
    if _PROFILING_COMPILED_OUT:
        return _NOOP_MARKER
    return _Marker(name or "unknown")


def profile(name_or_func: Union[str, Callable, None] = None) -> Callable:
    """
    Decorator timing each call of a function.

    Usable bare (@profile, the marker is the function name) or with a
    marker name (@profile("name")).
    """
    def decorator(func: Callable) -> Callable:
        if _PROFILING_COMPILED_OUT:
            return func
        marker_name = name_or_func if isinstance(name_or_func, str) else func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not _recorder.enabled:
                return func(*args, **kwargs)
            with _Marker(marker_name):
                return func(*args, **kwargs)

        return wrapper

    if callable(name_or_func):
        return decorator(name_or_func)
    return decorator
