"""Orbital elements from heliocentric position and velocity."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from skypal.vectors import Vector, normalize_angle

__all__ = [
    "UniversalElements",
    "OrbitalElements",
    "OrbitError",
    "pv_to_universal",
    "pv_to_elements",
]

GAUSSIAN_CONSTANT = 0.01720209895
SECONDS_PER_DAY = 86400.0

# Canonical days to seconds.
_CD2S = GAUSSIAN_CONSTANT / SECONDS_PER_DAY

# Sine and cosine of the J2000 mean obliquity (IAU 1976).
_SE = 0.3977771559319137
_CE = 0.9174820620691818

# How close to unity the eccentricity must be to call the orbit a parabola.
_PARABOLA = 1.0e-8


class OrbitError(ValueError):
    """The supplied state or options cannot give an orbit.

    ``status`` holds the numeric reason: -1 for an illegal planet mass,
    -2 for an illegal requested form (or, for universal elements, a body
    too close to the Sun) and -3 for a position or velocity out of range.
    """

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


@dataclass(frozen=True)
class UniversalElements:
    """Universal orbital elements of a two-body orbit.

    Velocities are in AU per canonical day; epochs are TT MJD.
    """

    combined_mass: float
    alpha: float
    epoch: float
    position: Vector
    velocity: Vector
    distance: float
    rdv: float
    date: float
    psi: float


@dataclass(frozen=True)
class OrbitalElements:
    """Heliocentric osculating elements (J2000 ecliptic and equinox).

    ``form`` is 1 (major planet), 2 (minor planet) or 3 (comet).  For
    form 1 ``perih`` is the longitude of perihelion, ``aorl`` the mean
    longitude and ``dm`` the daily motion; for form 2 ``perih`` is the
    argument of perihelion and ``aorl`` the mean anomaly; for form 3
    ``epoch`` is the epoch of perihelion and ``aorq`` the perihelion
    distance.  Values that a form does not define are None.
    """

    form: int
    epoch: float
    orbinc: float
    anode: float
    perih: float
    aorq: float
    e: float
    aorl: float | None = None
    dm: float | None = None


def _state(pv: Sequence[float]) -> tuple[float, ...]:
    values = tuple(float(c) for c in pv)
    if len(values) != 6:
        raise ValueError("a state vector needs six components")
    return values


def pv_to_universal(pv: Sequence[float], date: float, pmass: float = 0.0) -> UniversalElements:
    """Universal elements from a heliocentric state vector.

    ``pv`` is x, y, z (AU) and xdot, ydot, zdot (AU/s) in any inertial
    frame, ``date`` the TT MJD and ``pmass`` the planet mass (Sun = 1).
    """
    rmin = 1e-3
    vmin = 1e-3

    x, y, z, vx, vy, vz = _state(pv)
    if pmass < 0.0:
        raise OrbitError(-1, f"planet mass {pmass} is negative")
    cm = 1.0 + pmass

    xd, yd, zd = vx / _CD2S, vy / _CD2S, vz / _CD2S
    r = math.sqrt(x * x + y * y + z * z)
    v2 = xd * xd + yd * yd + zd * zd
    v = math.sqrt(v2)

    if r < rmin:
        raise OrbitError(-2, "body is too close to the Sun")
    if v < vmin:
        raise OrbitError(-3, "body is moving too slowly")

    return UniversalElements(
        combined_mass=cm,
        alpha=v2 - 2.0 * cm / r,
        epoch=date,
        position=(x, y, z),
        velocity=(xd, yd, zd),
        distance=r,
        rdv=x * xd + y * yd + z * zd,
        date=date,
        psi=0.0,
    )


def pv_to_elements(pv: Sequence[float], date: float, pmass: float, jformr: int) -> OrbitalElements:
    """Osculating elements from a heliocentric J2000 equatorial state vector.

    ``jformr`` requests form 1, 2 or 3; an orbit that is not elliptical is
    always returned in form 3.  The osculating epoch is ``date``.
    """
    rmin = 1e-3
    vmin = 1e-8

    px, py, pz, vx, vy, vz = _state(pv)
    if pmass < 0.0:
        raise OrbitError(-1, f"planet mass {pmass} is negative")
    if jformr not in (1, 2, 3):
        raise OrbitError(-2, f"element form {jformr} is not 1, 2 or 3")

    form = jformr

    # Equatorial to ecliptic; velocity to AU/day.
    x = px
    y = py * _CE + pz * _SE
    z = -py * _SE + pz * _CE
    xd = SECONDS_PER_DAY * vx
    yd = SECONDS_PER_DAY * (vy * _CE + vz * _SE)
    zd = SECONDS_PER_DAY * (-vy * _SE + vz * _CE)

    r = math.sqrt(x * x + y * y + z * z)
    v2 = xd * xd + yd * yd + zd * zd
    v = math.sqrt(v2)
    if r < rmin or v < vmin:
        raise OrbitError(-3, "position or velocity is out of range")

    rdv = x * xd + y * yd + z * zd
    gmu = (1.0 + pmass) * GAUSSIAN_CONSTANT * GAUSSIAN_CONSTANT

    # Angular momentum per unit reduced mass.
    hx = y * zd - z * yd
    hy = z * xd - x * zd
    hz = x * yd - y * xd
    hx2py2 = hx * hx + hy * hy
    h2 = hx2py2 + hz * hz
    h = math.sqrt(h2)

    oi = math.atan2(math.sqrt(hx2py2), hz)
    bigom = math.atan2(hx, -hy) if (hx != 0.0 or hy != 0.0) else 0.0

    ar = 2.0 / r - v2 / gmu
    ecc = math.sqrt(max(1.0 - ar * h2 / gmu, 0.0))

    s = h * rdv
    c = h2 - r * gmu
    at = math.atan2(s, c) if (s != 0.0 or c != 0.0) else 0.0

    s = math.sin(bigom)
    c = math.cos(bigom)
    u = math.atan2((-x * s + y * c) * math.cos(oi) + z * math.sin(oi), x * c + y * s)
    om = u - at

    if abs(ecc - 1.0) < _PARABOLA:
        ecc = 1.0
    if ecc > 1.0:
        form = 3

    gar3 = gmu * ar * ar * ar
    em1 = ecc - 1.0
    ep1 = ecc + 1.0
    hat = at / 2.0
    shat = math.sin(hat)
    chat = math.cos(hat)

    am = dn = pl = el = q = tp = 0.0

    if ecc < 1.0:
        ae = 2.0 * math.atan2(math.sqrt(-em1) * shat, math.sqrt(ep1) * chat)
        am = ae - ecc * math.sin(ae)
        dn = math.sqrt(gar3)

    if form == 1:
        pl = bigom + om
        el = pl + am

    if form == 3:
        q = h2 / (gmu * ep1)
        if ecc < 1.0:
            tp = date - am / dn
        else:
            that = shat / chat
            if ecc == 1.0:
                tp = date - that * (1.0 + that * that / 3.0) * h * h2 / (2.0 * gmu * gmu)
            else:
                thhf = math.sqrt(em1 / ep1) * that
                f = math.log(1.0 + thhf) - math.log(1.0 - thhf)
                tp = date - (ecc * math.sinh(f) - f) / math.sqrt(-gar3)

    anode = normalize_angle(bigom)
    if form == 1:
        return OrbitalElements(
            form=1, epoch=date, orbinc=oi, anode=anode, perih=normalize_angle(pl),
            aorq=1.0 / ar, e=ecc, aorl=normalize_angle(el), dm=dn,
        )
    if form == 2:
        return OrbitalElements(
            form=2, epoch=date, orbinc=oi, anode=anode, perih=normalize_angle(om),
            aorq=1.0 / ar, e=ecc, aorl=normalize_angle(am),
        )
    return OrbitalElements(
        form=3, epoch=tp, orbinc=oi, anode=anode, perih=normalize_angle(om),
        aorq=q, e=ecc,
    )