#!/usr/bin/env python3
"""
Deterministic random number generator for the property tests.
"""

from weierstrass import AffinePoint


class DeterministicRNG:
    """Linear congruential generator, so every test run draws the same values."""

    def __init__(self, seed):
        if isinstance(seed, bytes):
            seed = int.from_bytes(seed, 'big')
        self.state = seed

    def _next(self):
        # Parameters from Numerical Recipes
        self.state = (1664525 * self.state + 1013904223) & 0xFFFFFFFF
        return self.state

    def randbits(self, k):
        """Return a non-negative integer with at most k random bits."""
        value = 0
        for _ in range((k + 31) // 32):
            value = (value << 32) | self._next()
        return value >> (-k % 32)

    def randint(self, a, b):
        """Random integer in [a, b] inclusive."""
        if a > b:
            raise ValueError("a must be <= b")
        range_size = b - a + 1
        return a + self.randbits(range_size.bit_length() + 32) % range_size

    def point(self, m):
        """Random affine point with coordinates in [0, m), not necessarily on any curve."""
        return AffinePoint(self.randint(0, m - 1), self.randint(0, m - 1))
