"""
Short Weierstrass curves y^2 = x^3 + ax + b over Z/mZ.
"""

from dataclasses import dataclass

from . import arithmetic
from .field import GF, checked_mod_inverse, mod_inverse
from .point import INFINITY, AffinePoint
from .trace import NULL_TRACER


class PointNotOnCurveError(ValueError):
    """Raised by a validating curve for a point that does not satisfy its equation."""


@dataclass(frozen=True)
class CurveParameters:
    """Coefficients a, b and modulus m of a curve."""

    a: int
    b: int
    m: int

    def __post_init__(self):
        if self.m <= 0:
            raise ValueError(f"Modulus must be positive, got {self.m}")

    def contains(self, point):
        """Check y^2 == x^3 + ax + b (mod m). The point at infinity is always on the curve."""
        if point.is_infinity():
            return True
        x, y = point.x, point.y
        return (y * y - (x * x * x + self.a * x + self.b)) % self.m == 0


# Parameters and sample points of the reference example
REFERENCE_CURVE = CurveParameters(a=3, b=15, m=17)
REFERENCE_P = AffinePoint(12, 6)
REFERENCE_Q = AffinePoint(5, 5)


class WeierstrassCurve:
    """Group law bound to one set of curve parameters.

    With validate=False the curve behaves exactly like the functions in
    weierstrass.arithmetic and never raises on bad input. With
    validate=True, operands must lie on the curve (PointNotOnCurveError)
    and slope denominators must be invertible (NotInvertibleError).
    """

    def __init__(self, params, tracer=None, validate=False):
        self.params = params
        self.field = GF(params.m)
        self.tracer = tracer or NULL_TRACER
        self.validate = validate

    @classmethod
    def from_coefficients(cls, a, b, m, **kwargs):
        return cls(CurveParameters(a, b, m), **kwargs)

    @property
    def a(self):
        return self.params.a

    @property
    def b(self):
        return self.params.b

    @property
    def m(self):
        return self.params.m

    def __call__(self, x, y):
        """Create a point on the curve."""
        if x is None and y is None:
            return self.infinity()
        return self._check(AffinePoint(x, y))

    def infinity(self):
        """Return the point at infinity."""
        return INFINITY

    def contains(self, point):
        return self.params.contains(point)

    def _check(self, *points):
        if self.validate:
            for point in points:
                if not self.params.contains(point):
                    raise PointNotOnCurveError(f"Point {point!r} not on curve")
        return points[0]

    def mod_inverse(self, value):
        return self.field.inverse(value, checked=self.validate)

    def add(self, p, q):
        self._check(p, q)
        invert = checked_mod_inverse if self.validate else mod_inverse
        return arithmetic.add(p, q, self.a, self.b, self.m, tracer=self.tracer, invert=invert)

    def double(self, p):
        return self.add(p, p)

    def inverse(self, p):
        self._check(p)
        return arithmetic.inverse(p, self.m)

    def __repr__(self):
        return f"WeierstrassCurve(GF({self.m}), [{self.a}, {self.b}])"

