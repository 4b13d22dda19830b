"""
Wall-clock timing for solver phases.

A backend starts one Timer per solve, wraps each phase (building the
augmented buffer, elimination, substitution) in a named section, and
stores the resulting dict in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Per-solve phase timer.

    start() and stop() bracket the whole solve; section(name) measures one
    phase and adds to any earlier measurement under the same name.

        timer = Timer()
        timer.start()
        with timer.section('augment'):
            aug = build_augmented(A, b)
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'augment': ...}
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._t0: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under name, even if it raises."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + time.perf_counter() - t0

    def result(self) -> dict[str, float]:
        """Total seconds plus one entry per phase; only valid after stop()."""
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}
