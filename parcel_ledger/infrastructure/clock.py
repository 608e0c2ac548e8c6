"""Ledger Clock — nanosecond timestamps that never run backwards.

Invariants:
    - Each reading is >= the previous reading from the same clock
    - Readings are integer nanoseconds since the Unix epoch

Design Decisions:
    - Wall-clock time_ns clamped to the last reading: history entries stay in
      chronological order even if the host clock is stepped back
"""

import time

from parcel_ledger.core.domain_types import Timestamp


class MonotonicClock:
    """Callable clock injected into the package ledger."""

    def __init__(self, source=time.time_ns):
        self._source = source
        self._last = 0

    def __call__(self) -> Timestamp:
        self._last = max(self._last, self._source())
        return Timestamp(self._last)
