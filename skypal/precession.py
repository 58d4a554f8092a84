"""Precession matrix of the old Bessel-Newcomb model."""

from __future__ import annotations

import math

from skypal.vectors import Matrix, matrix_product

__all__ = ["bessel_newcomb_matrix"]

_ARCSEC_TO_RAD = 4.8481368110953599358991410235794797595635330237270e-6

_IDENTITY: Matrix = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def _rotation(axis: str, angle: float) -> Matrix:
    """Matrix rotating the reference frame about one axis."""
    s = math.sin(angle)
    c = math.cos(angle)
    if axis == "X":
        return ((1.0, 0.0, 0.0), (0.0, c, s), (0.0, -s, c))
    if axis == "Y":
        return ((c, 0.0, -s), (0.0, 1.0, 0.0), (s, 0.0, c))
    return ((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0))


def _euler(order: str, *angles: float) -> Matrix:
    """Rotation matrix for successive rotations about the named axes."""
    result = _IDENTITY
    for axis, angle in zip(order, angles):
        result = matrix_product(_rotation(axis, angle), result)
    return result


def bessel_newcomb_matrix(bep0: float, bep1: float) -> Matrix:
    """Precession matrix between two Besselian epochs (pre-IAU 1976 model).

    Uses Kinoshita's formulation.  The matrix is in the sense
    ``v(bep1) = M * v(bep0)``.
    """
    bigt = (bep0 - 1850.0) / 100.0
    t = (bep1 - bep0) / 100.0

    tas2r = t * _ARCSEC_TO_RAD
    w = 2303.5548 + (1.39720 + 0.000059 * bigt) * bigt

    zeta = (w + (0.30242 - 0.000269 * bigt + 0.017996 * t) * t) * tas2r
    z = (w + (1.09478 + 0.000387 * bigt + 0.018324 * t) * t) * tas2r
    theta = (
        2005.1125
        + (-0.85294 - 0.000365 * bigt) * bigt
        + (-0.42647 - 0.000365 * bigt - 0.041802 * t) * t
    ) * tas2r

    return _euler("ZYZ", -zeta, theta, -z)