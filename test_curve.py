#!/usr/bin/env python3
"""
Tests for curve parameters and the WeierstrassCurve wrapper.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import dataclasses

import pytest

from weierstrass import (
    INFINITY, REFERENCE_CURVE, REFERENCE_P, REFERENCE_Q,
    AffinePoint, CurveParameters, NotInvertibleError, PointNotOnCurveError,
    PrintTracer, RecordingTracer, WeierstrassCurve,
    add, double, inverse
)
from drng import DeterministicRNG

# Points on y^2 = x^3 + 3x + 15 over GF(17)
ON_CURVE = [AffinePoint(0, 7), AffinePoint(0, 10), AffinePoint(1, 6), AffinePoint(1, 11)]


def test_reference_parameters():
    assert REFERENCE_CURVE == CurveParameters(a=3, b=15, m=17)
    assert REFERENCE_P == AffinePoint(12, 6)
    assert REFERENCE_Q == AffinePoint(5, 5)


def test_parameters_validation():
    with pytest.raises(ValueError):
        CurveParameters(3, 15, 0)
    with pytest.raises(ValueError):
        CurveParameters(3, 15, -17)
    with pytest.raises(dataclasses.FrozenInstanceError):
        REFERENCE_CURVE.m = 19


def test_contains():
    for point in ON_CURVE:
        assert REFERENCE_CURVE.contains(point)
    assert REFERENCE_CURVE.contains(INFINITY)
    assert not REFERENCE_CURVE.contains(REFERENCE_P)
    assert not REFERENCE_CURVE.contains(REFERENCE_Q)


def test_curve_matches_functions():
    curve = WeierstrassCurve(REFERENCE_CURVE)
    p, q = REFERENCE_P, REFERENCE_Q
    assert curve.add(p, q) == add(p, q, 3, 15, 17) == AffinePoint(15, 13)
    assert curve.double(p) == double(p, 3, 15, 17) == AffinePoint(15, 4)
    assert curve.inverse(p) == inverse(p, 17) == AffinePoint(12, 11)
    assert curve.mod_inverse(2) == 9
    assert curve.mod_inverse(-1) == 16
    assert WeierstrassCurve(REFERENCE_CURVE, validate=True).mod_inverse(-3) == 11


def test_curve_matches_functions_on_random_points():
    curve = WeierstrassCurve.from_coefficients(2, 3, 97)
    rng = DeterministicRNG(b"curve_wrapper_seed")
    for _ in range(25):
        p, q = rng.point(97), rng.point(97)
        assert curve.add(p, q) == add(p, q, 2, 3, 97)
        assert curve.double(p) == double(p, 2, 3, 97)
        assert curve.inverse(p) == inverse(p, 97)


def test_point_construction():
    curve = WeierstrassCurve(REFERENCE_CURVE)
    assert curve(None, None) is INFINITY
    assert curve.infinity() is INFINITY
    # no membership check without validation
    assert curve(12, 6) == REFERENCE_P


def test_validating_curve_rejects_points_off_curve():
    curve = WeierstrassCurve(REFERENCE_CURVE, validate=True)
    assert curve(0, 7) == AffinePoint(0, 7)
    with pytest.raises(PointNotOnCurveError):
        curve(12, 6)
    with pytest.raises(PointNotOnCurveError):
        curve.add(AffinePoint(0, 7), REFERENCE_Q)
    with pytest.raises(PointNotOnCurveError):
        curve.double(REFERENCE_P)
    with pytest.raises(ValueError):
        curve.inverse(REFERENCE_P)


def test_validating_curve_on_curve_points():
    curve = WeierstrassCurve(REFERENCE_CURVE, validate=True)
    assert curve.add(AffinePoint(0, 7), AffinePoint(1, 6)) == AffinePoint(11, 4)
    for p in ON_CURVE:
        assert curve.add(p, INFINITY) == p
        assert curve.add(p, curve.inverse(p)) is INFINITY
        assert curve.double(p) == double(p, 3, 15, 17)


def test_validating_curve_rejects_non_invertible_slope():
    params = CurveParameters(a=1, b=0, m=17)
    point = AffinePoint(1, 6)
    assert params.contains(point)

    assert WeierstrassCurve(params).double(point) == AffinePoint(14, 11)
    with pytest.raises(NotInvertibleError):
        WeierstrassCurve(params, validate=True).double(point)
    with pytest.raises(NotInvertibleError):
        WeierstrassCurve(params, validate=True).mod_inverse(0)


def test_curve_tracer(capsys):
    recorder = RecordingTracer()
    WeierstrassCurve(REFERENCE_CURVE, tracer=recorder).add(REFERENCE_P, REFERENCE_Q)
    assert recorder.records == [("x3", 15), ("y3", 13)]

    WeierstrassCurve(REFERENCE_CURVE, tracer=PrintTracer()).double(REFERENCE_P)
    assert capsys.readouterr().out == "Debug: x3 = 15\nDebug: y3 = 4\n"


def test_repr():
    assert repr(WeierstrassCurve(REFERENCE_CURVE)) == "WeierstrassCurve(GF(17), [3, 15])"


def main():
    print("Testing curves...")
    test_reference_parameters()
    test_parameters_validation()
    test_contains()
    test_curve_matches_functions()
    test_curve_matches_functions_on_random_points()
    test_point_construction()
    test_validating_curve_rejects_points_off_curve()
    test_validating_curve_on_curve_points()
    test_validating_curve_rejects_non_invertible_slope()
    # test_curve_tracer needs pytest's capsys and only runs under pytest
    test_repr()
    print("✓ All curve tests passed!")


if __name__ == "__main__":
    main()
