"""
Points of a short Weierstrass curve group.

A point is either affine, with both coordinates set, or the point at
infinity, with neither. The two cases are separate types, so a point with
a single coordinate cannot be built.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Point(ABC):
    """Element of the curve group."""

    __slots__ = ()

    @staticmethod
    def finite(x, y):
        return AffinePoint(x, y)

    @staticmethod
    def infinity():
        return INFINITY

    @abstractmethod
    def is_infinity(self):
        raise NotImplementedError

    @property
    def coordinate_x(self):
        return None

    @property
    def coordinate_y(self):
        return None


@dataclass(frozen=True, repr=False)
class AffinePoint(Point):
    """Point (x, y) with integer coordinates."""

    x: int
    y: int

    def __post_init__(self):
        if self.x is None or self.y is None:
            raise ValueError("Affine point needs both coordinates")

    def is_infinity(self):
        return False

    @property
    def coordinate_x(self):
        return self.x

    @property
    def coordinate_y(self):
        return self.y

    def __iter__(self):
        return iter((self.x, self.y))

    def __repr__(self):
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, repr=False)
class PointAtInfinity(Point):
    """Identity element of the group."""

    def is_infinity(self):
        return True

    def __repr__(self):
        return "Point at infinity"


INFINITY = PointAtInfinity()
