"""
Point arithmetic on short Weierstrass curves over Z/mZ.
"""

from .field import GF, PrimeField, NotInvertibleError, mod_inverse, checked_mod_inverse
from .point import Point, AffinePoint, PointAtInfinity, INFINITY
from .arithmetic import add, double, inverse
from .curve import (
    CurveParameters, WeierstrassCurve, PointNotOnCurveError,
    REFERENCE_CURVE, REFERENCE_P, REFERENCE_Q
)
from .trace import Tracer, PrintTracer, RecordingTracer

__all__ = [
    'GF', 'PrimeField', 'NotInvertibleError', 'mod_inverse', 'checked_mod_inverse',
    'Point', 'AffinePoint', 'PointAtInfinity', 'INFINITY',
    'add', 'double', 'inverse',
    'CurveParameters', 'WeierstrassCurve', 'PointNotOnCurveError',
    'REFERENCE_CURVE', 'REFERENCE_P', 'REFERENCE_Q',
    'Tracer', 'PrintTracer', 'RecordingTracer'
]
