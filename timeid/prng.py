"""SFC32 counter generator for fast, non-cryptographic 32-bit draws."""

import random
import threading
import time

from internal.logging import get_logger

MASK32 = 0xFFFFFFFF
WARMUP_ROUNDS = 15

_local = threading.local()


class Sfc32:
    """Small Fast Counter generator over four 32-bit words.

    Not thread-safe: give each thread (or task) its own instance,
    or use get_prng() for a per-thread default.
    """

    __slots__ = ("_a", "_b", "_c", "_d", "draws")

    def __init__(self, seed=None):
        if seed is None:
            seed = (int(time.time() * 1000), random.getrandbits(32), random.getrandbits(32), 1)
        a, b, c, d = seed
        self._a = a & MASK32
        self._b = b & MASK32
        self._c = c & MASK32
        self._d = d & MASK32
        for _ in range(WARMUP_ROUNDS):
            self._advance()
        self.draws = 0

    def _advance(self):
        a, b, c, d = self._a, self._b, self._c, self._d
        t = (a + b) & MASK32
        d = (d + 1) & MASK32
        self._a = b ^ (b >> 9)
        self._b = (c + (c << 3)) & MASK32
        c = ((c << 21) | (c >> 11)) & MASK32
        self._c = (c + t) & MASK32
        self._d = d
        return (t + d) & MASK32

    def next_uint32(self):
        """Draw one unsigned 32-bit integer."""
        self.draws += 1
        return self._advance()

    def state(self):
        return (self._a, self._b, self._c, self._d)


def get_prng():
    """Per-thread default generator, created on first use."""
    prng = getattr(_local, "prng", None)
    if prng is None:
        prng = _local.prng = Sfc32()
        get_logger().debug("prng seeded", thread=threading.current_thread().name)
    return prng
