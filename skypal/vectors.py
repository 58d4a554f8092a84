"""Spherical coordinates, 3-vectors and 3x3 rotation matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vector = tuple[float, float, float]
Matrix = tuple[Vector, Vector, Vector]

__all__ = [
    "Vector",
    "Matrix",
    "spherical_to_cartesian",
    "cartesian_to_spherical",
    "normalize_angle",
    "dot",
    "cross",
    "unit_vector",
    "matrix_times_vector",
    "transpose_times_vector",
    "matrix_product",
    "axial_vector_to_matrix",
    "matrix_to_axial_vector",
    "separation",
    "vector_separation",
    "bearing",
    "vector_bearing",
]


def _vec(v: Sequence[float]) -> Vector:
    x, y, z = v
    return (float(x), float(y), float(z))


def _norm(v: Sequence[float]) -> float:
    return math.sqrt(dot(v, v))


def spherical_to_cartesian(a: float, b: float) -> Vector:
    """Direction cosines for longitude ``a`` and latitude ``b`` (radians)."""
    cb = math.cos(b)
    return (math.cos(a) * cb, math.sin(a) * cb, math.sin(b))


def cartesian_to_spherical(v: Sequence[float]) -> tuple[float, float]:
    """Longitude and latitude (radians) of a Cartesian vector."""
    x, y, z = _vec(v)
    d2 = x * x + y * y
    a = 0.0 if d2 == 0.0 else math.atan2(y, x)
    b = 0.0 if z == 0.0 else math.atan2(z, math.sqrt(d2))
    return a, b


def normalize_angle(angle: float) -> float:
    """Normalize an angle into the range 0 to 2pi."""
    w = math.fmod(angle, math.tau)
    if w < 0.0:
        w += math.tau
    return w


def dot(va: Sequence[float], vb: Sequence[float]) -> float:
    """Scalar product of two 3-vectors."""
    return sum(a * b for a, b in zip(_vec(va), _vec(vb)))


def cross(va: Sequence[float], vb: Sequence[float]) -> Vector:
    """Vector product of two 3-vectors."""
    xa, ya, za = _vec(va)
    xb, yb, zb = _vec(vb)
    return (ya * zb - za * yb, za * xb - xa * zb, xa * yb - ya * xb)


def unit_vector(v: Sequence[float]) -> tuple[Vector, float]:
    """Return the unit vector along ``v`` and the modulus of ``v``.

    A null vector gives a null unit vector and a modulus of zero.
    """
    vv = _vec(v)
    modulus = _norm(vv)
    if modulus == 0.0:
        return (0.0, 0.0, 0.0), 0.0
    return tuple(c / modulus for c in vv), modulus  # type: ignore[return-value]


def matrix_times_vector(dm: Sequence[Sequence[float]], va: Sequence[float]) -> Vector:
    """Forward unitary transformation: ``dm * va``."""
    v = _vec(va)
    return tuple(dot(row, v) for row in dm)  # type: ignore[return-value]


def transpose_times_vector(dm: Sequence[Sequence[float]], va: Sequence[float]) -> Vector:
    """Backward unitary transformation: ``transpose(dm) * va``."""
    v = _vec(va)
    return tuple(dot(col, v) for col in zip(*dm))  # type: ignore[return-value]


def matrix_product(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Product ``a * b`` of two 3x3 matrices."""
    cols = list(zip(*b))
    return tuple(  # type: ignore[return-value]
        tuple(dot(row, col) for col in cols) for row in a
    )


def axial_vector_to_matrix(axvec: Sequence[float]) -> Matrix:
    """Rotation matrix for an axial vector whose length is the angle in radians."""
    x, y, z = _vec(axvec)
    phi = math.sqrt(x * x + y * y + z * z)
    s = math.sin(phi)
    c = math.cos(phi)
    f = 1.0 - c
    if phi > 0.0:
        x, y, z = x / phi, y / phi, z / phi
    return (
        (x * x * f + c, x * y * f + z * s, x * z * f - y * s),
        (y * x * f - z * s, y * y * f + c, y * z * f + x * s),
        (z * x * f + y * s, z * y * f - x * s, z * z * f + c),
    )


def matrix_to_axial_vector(rmat: Sequence[Sequence[float]]) -> Vector:
    """Axial vector (radians) corresponding to a rotation matrix."""
    r = [list(row) for row in rmat]
    x = r[1][2] - r[2][1]
    y = r[2][0] - r[0][2]
    z = r[0][1] - r[1][0]
    s2 = math.sqrt(x * x + y * y + z * z)
    if s2 > 0.0:
        c2 = r[0][0] + r[1][1] + r[2][2] - 1.0
        phi = math.atan2(s2, c2)
        f = phi / s2
        return (x * f, y * f, z * f)
    return (0.0, 0.0, 0.0)


def vector_separation(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Angle in radians between two vectors; always non-negative."""
    ss = _norm(cross(v1, v2))
    cs = dot(v1, v2)
    if ss != 0.0 or cs != 0.0:
        return math.atan2(ss, cs)
    return 0.0


def separation(a1: float, b1: float, a2: float, b2: float) -> float:
    """Angle in radians between two points on a sphere."""
    return vector_separation(spherical_to_cartesian(a1, b1), spherical_to_cartesian(a2, b2))


def bearing(a1: float, b1: float, a2: float, b2: float) -> float:
    """Position angle of point 2 seen from point 1, in the range +/- pi.

    Due east gives +pi/2; coincident points give zero.
    """
    dl = a2 - a1
    y = math.sin(dl) * math.cos(b2)
    x = math.sin(b2) * math.cos(b1) - math.cos(b2) * math.sin(b1) * math.cos(dl)
    if x != 0.0 or y != 0.0:
        return math.atan2(y, x)
    return 0.0


def vector_bearing(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Position angle of direction ``v2`` with respect to direction ``v1``."""
    a = _vec(v1)
    b = _vec(v2)
    au, am = unit_vector(a)
    bm = _norm(b)
    if am == 0.0 or bm == 0.0:
        st, ct = 0.0, 1.0
    else:
        xa, ya, za = a
        eta = (-xa * za, -ya * za, xa * xa + ya * ya)
        xi = cross(eta, au)
        a2b = tuple(p - q for p, q in zip(b, a))
        st = dot(a2b, xi)
        ct = dot(a2b, eta)
        if st == 0.0 and ct == 0.0:
            ct = 1.0
    return math.atan2(st, ct)