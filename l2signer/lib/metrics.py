"""Process-local counters for withdrawal signing outcomes."""

from __future__ import annotations

import threading
from collections import Counter
from typing import Dict

SIGN_ATTEMPT = "withdraw.sign.attempt"
SIGN_SUCCESS = "withdraw.sign.success"
SIGN_ERROR = "withdraw.sign.error"


class SigningMetrics:
    """Thread-safe counters keyed by dotted event name.

    Errors are also counted per exception type under ``withdraw.sign.error.<Type>``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: Counter[str] = Counter()

    def increment(self, name: str, value: int = 1) -> None:
        with self._lock:
            self._counts[name] += value

    def record_error(self, exc: BaseException) -> None:
        with self._lock:
            self._counts[SIGN_ERROR] += 1
            self._counts[f"{SIGN_ERROR}.{type(exc).__name__}"] += 1

    def get(self, name: str) -> int:
        with self._lock:
            return self._counts[name]

    def snapshot(self, prefix: str | None = None) -> Dict[str, int]:
        with self._lock:
            return {name: count for name, count in self._counts.items() if prefix is None or name.startswith(prefix)}

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()


METRICS = SigningMetrics()
