import time


class MonotonicClock:
    def now_ms(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """Clock advanced explicitly, for replaying recorded edit sessions."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now_ms = start_ms

    def now_ms(self) -> float:
        return self._now_ms

    def advance(self, ms: float) -> None:
        self._now_ms += ms
