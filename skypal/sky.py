"""Parallactic angle, tangent-plane distortion and polar motion."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["PolarMotion", "parallactic_angle", "pincushion", "polar_motion"]


@dataclass(frozen=True)
class PolarMotion:
    """Site coordinates corrected for polar motion.

    ``elong`` is the true longitude (radians, east positive), ``phi`` the
    true geodetic latitude (radians) and ``daz`` the azimuth correction
    (terrestrial minus celestial, radians).
    """

    elong: float
    phi: float
    daz: float


def parallactic_angle(ha: float, dec: float, phi: float) -> float:
    """Parallactic angle, in the range -pi to +pi, for an HA and Dec.

    ``ha`` and ``dec`` are geocentric apparent (radians) and ``phi`` is
    the geodetic latitude of the observatory.  At the pole zero is
    returned.
    """
    cp = math.cos(phi)
    sqsz = cp * math.sin(ha)
    cqsz = math.sin(phi) * math.cos(dec) - cp * math.sin(dec) * math.cos(ha)
    if sqsz == 0.0 and cqsz == 0.0:
        cqsz = 1.0
    return math.atan2(sqsz, cqsz)


def pincushion(disco: float, x: float, y: float) -> tuple[float, float]:
    """Apply pincushion (``disco`` > 0) or barrel (< 0) distortion.

    The radial distance ``r`` from the tangent point becomes
    ``r * (1 + disco * r**2)``.
    """
    f = 1.0 + disco * (x * x + y * y)
    return x * f, y * f


def polar_motion(elongm: float, phim: float, xp: float, yp: float) -> PolarMotion:
    """Correct a site's mean longitude and latitude for polar motion.

    ``elongm`` is east positive.  ``xp`` and ``yp`` are the coordinates of
    the celestial ephemeris pole relative to the IERS reference pole, in
    radians.
    """
    sel = math.sin(elongm)
    cel = math.cos(elongm)
    sph = math.sin(phim)
    cph = math.cos(phim)

    xm = cel * cph
    ym = sel * cph
    zm = sph

    sxp = math.sin(xp)
    cxp = math.cos(xp)
    syp = math.sin(yp)
    cyp = math.cos(yp)

    zw = -ym * syp + zm * cyp

    xt = xm * cxp - zw * sxp
    yt = ym * cyp + zm * syp
    zt = xm * sxp + zw * cxp

    # Geocentric direction of the terrestrial pole, rotated likewise.
    xnm = -sxp * cyp
    ynm = syp
    znm = cxp * cyp

    cph = math.hypot(xt, yt)
    if cph == 0.0:
        # Site at a pole: the azimuth of the terrestrial pole is undefined.
        xt = 1.0
        sel = cel = math.nan
    else:
        sel = yt / cph
        cel = xt / cph

    elong = math.atan2(yt, xt) if (xt != 0.0 or yt != 0.0) else 0.0
    phi = math.atan2(zt, cph)

    xnt = (xnm * cel + ynm * sel) * zt - znm * cph
    ynt = -xnm * sel + ynm * cel
    daz = math.atan2(-ynt, -xnt) if (xnt != 0.0 or ynt != 0.0) else 0.0

    return PolarMotion(elong, phi, daz)