import math

import pytest

from skypal.precession import bessel_newcomb_matrix
from skypal.vectors import matrix_product

DAS2R = 4.8481368110953599358991410235794797595635330237270e-6


def _assert_identity(m, tol):
    for i, row in enumerate(m):
        for j, value in enumerate(row):
            assert value == pytest.approx(1.0 if i == j else 0.0, abs=tol)


def _det(m):
    (a, b, c), (d, e, f), (g, h, i) = m
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def test_same_epoch_gives_identity():
    _assert_identity(bessel_newcomb_matrix(1950.0, 1950.0), 0.0)


@pytest.mark.parametrize("bep0, bep1", [(1925.0, 1975.0), (1900.0, 1950.0), (1950.0, 1850.0)])
def test_matrix_is_a_rotation(bep0, bep1):
    m = bessel_newcomb_matrix(bep0, bep1)
    mt = tuple(zip(*m))
    _assert_identity(matrix_product(m, mt), 1e-14)
    assert _det(m) == pytest.approx(1.0, abs=1e-14)


def test_reverse_precession_is_nearly_inverse():
    forward = bessel_newcomb_matrix(1925.0, 1975.0)
    backward = bessel_newcomb_matrix(1975.0, 1925.0)
    _assert_identity(matrix_product(backward, forward), 1e-8)


def test_successive_intervals_compose():
    direct = bessel_newcomb_matrix(1900.0, 1950.0)
    stepped = matrix_product(
        bessel_newcomb_matrix(1925.0, 1950.0), bessel_newcomb_matrix(1900.0, 1925.0)
    )
    for row_a, row_b in zip(direct, stepped):
        for a, b in zip(row_a, row_b):
            assert a == pytest.approx(b, abs=1e-8)


def test_pole_moves_about_2005_arcsec_per_century():
    m = bessel_newcomb_matrix(1850.0, 1950.0)
    theta_arcsec = math.acos(m[2][2]) / DAS2R
    assert abs(theta_arcsec - 2005.1125) < 2.0


def test_forward_precession_increases_right_ascension():
    m = bessel_newcomb_matrix(1925.0, 1975.0)
    assert m[0][1] < 0.0
    assert m[1][0] > 0.0