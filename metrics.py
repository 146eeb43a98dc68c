import threading


class HitCounter:
    """Counts requests to the file server. Shared by every request thread."""

    def __init__(self):
        self._hits = 0
        self._lock = threading.Lock()

    def increment(self):
        with self._lock:
            self._hits += 1
            return self._hits

    def value(self):
        with self._lock:
            return self._hits

    def reset(self):
        with self._lock:
            self._hits = 0
