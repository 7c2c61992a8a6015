"""
Utility helpers shared across routers/services.
"""

import threading
import time

_id_lock = threading.Lock()
_last_id = 0


def new_id() -> str:
    """
    Decimal id derived from the nanosecond clock.

    Ids are strictly increasing inside the process, so two calls landing on the
    same clock tick still get distinct values.
    """
    global _last_id
    with _id_lock:
        candidate = time.time_ns()
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
    return str(candidate)


def unix_now() -> int:
    return int(time.time())
