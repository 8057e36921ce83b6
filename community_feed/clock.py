import time
from threading import Lock


_last_ms = 0
_clock_lock = Lock()


def now_ms() -> int:
    """Wall-clock epoch milliseconds, never lower than a previous call."""
    global _last_ms

    with _clock_lock:
        current = int(time.time() * 1000)
        if current < _last_ms:
            current = _last_ms
        _last_ms = current
        return current
