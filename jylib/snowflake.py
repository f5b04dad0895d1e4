"""Snowflake-style 64-bit unique id generation."""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Callable

WORKER_BITS = 10
NUMBER_BITS = 12
WORKER_MAX = (1 << WORKER_BITS) - 1
NUMBER_MAX = (1 << NUMBER_BITS) - 1
TIME_SHIFT = WORKER_BITS + NUMBER_BITS
WORKER_SHIFT = NUMBER_BITS
EPOCH_MS = 1525705533000


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class Worker:
    """Generates ids from a millisecond timestamp, a worker id and a sequence."""

    def __init__(self, worker_id: int, clock: Callable[[], int] | None = None):
        if worker_id < 0 or worker_id > WORKER_MAX:
            raise ValueError("Worker ID excess of quantity")
        self.worker_id = worker_id
        self._clock = clock or _now_ms
        self._lock = threading.Lock()
        self._timestamp = 0
        self._number = 0

    def next_id(self) -> int:
        with self._lock:
            now = self._clock()
            if now == self._timestamp:
                self._number += 1
                if self._number > NUMBER_MAX:
                    while now <= self._timestamp:
                        now = self._clock()
                    self._number = 0
                    self._timestamp = now
            else:
                self._number = 0
                self._timestamp = now
            return (
                ((now - EPOCH_MS) << TIME_SHIFT)
                | (self.worker_id << WORKER_SHIFT)
                | self._number
            )


def _env_worker_id() -> int:
    try:
        return int(os.environ.get("SNOW_WORK_ID", "").strip(), 0)
    except ValueError:
        return 0


_default_worker: Worker | None = None
_default_lock = threading.Lock()


def snow_id() -> int:
    """Next id from the process-wide worker (id from SNOW_WORK_ID plus one)."""
    global _default_worker
    with _default_lock:
        if _default_worker is None:
            _default_worker = Worker(_env_worker_id() + 1)
    return _default_worker.next_id()