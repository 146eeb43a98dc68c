"""
Unit tests for metrics.HitCounter.
"""

from __future__ import annotations

import threading

from metrics import HitCounter


class TestHitCounter:
    def test_starts_at_zero(self):
        assert HitCounter().value() == 0

    def test_increment_returns_new_value(self):
        c = HitCounter()
        assert c.increment() == 1
        assert c.increment() == 2
        assert c.value() == 2

    def test_reset(self):
        c = HitCounter()
        for _ in range(5):
            c.increment()
        c.reset()
        assert c.value() == 0

    def test_concurrent_increments(self):
        c = HitCounter()

        def worker():
            for _ in range(1000):
                c.increment()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert c.value() == 8000
