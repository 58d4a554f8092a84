# skypal

Small, dependency-free building blocks for positional astronomy.

## Installation

```
pip install skypal
```

To run the test suite:

```
pip install "skypal[test]"
pytest
```

## Modules

- `skypal.vectors`: spherical/Cartesian conversion (`spherical_to_cartesian`,
  `cartesian_to_spherical`), `normalize_angle` (into 0 to 2pi), `dot`,
  `cross`, `unit_vector` (unit vector and modulus), 3x3 matrix helpers
  (`matrix_times_vector`, `transpose_times_vector`, `matrix_product`,
  `axial_vector_to_matrix`, `matrix_to_axial_vector`) and angular measures
  (`separation`, `vector_separation`, `bearing`, `vector_bearing`).
  Vectors and matrices are returned as tuples.
- `skypal.timeconv`: Gregorian calendar and Modified Julian Date conversion
  (`calendar_to_mjd`, `mjd_to_calendar`, which returns a `CalendarDate`),
  sexagesimal conversions (`dms_to_radians`, `hms_to_days`, `hms_to_radians`,
  and `days_to_hms`, `radians_to_dms`, `radians_to_hms`, which return a
  `Sexagesimal`), and Besselian/Julian epochs (`besselian_epoch`,
  `besselian_epoch_to_mjd`, `julian_epoch`, `julian_epoch_to_mjd`).
  Out-of-range fields raise `FieldRangeError`, whose `field` names the
  offending field and whose `value` holds the result when one could still
  be computed.
- `skypal.sky`: `parallactic_angle`, `pincushion` (pincushion or barrel
  distortion of tangent-plane coordinates) and `polar_motion`, which
  returns a `PolarMotion` with the true longitude, true latitude and
  azimuth correction.
- `skypal.precession`: `bessel_newcomb_matrix`, the precession matrix
  between two Besselian epochs in the old (pre-IAU 1976) model.
- `skypal.orbits`: `pv_to_universal` (returning `UniversalElements`) and
  `pv_to_elements` (returning `OrbitalElements` in form 1, 2 or 3; orbits
  that are not elliptical always come back in form 3). Invalid input
  raises `OrbitError`, whose `status` gives the numeric reason.

## Example

```python
import math

from skypal.precession import bessel_newcomb_matrix
from skypal.sky import parallactic_angle
from skypal.timeconv import calendar_to_mjd, julian_epoch
from skypal.vectors import (
    cartesian_to_spherical,
    matrix_times_vector,
    normalize_angle,
    spherical_to_cartesian,
)

mjd = calendar_to_mjd(2000, 1, 1)
print(mjd, julian_epoch(mjd))

# Precess a position from B1900 to B1950 in the old model.
ra, dec = math.radians(150.0), math.radians(20.0)
m = bessel_newcomb_matrix(1900.0, 1950.0)
v = matrix_times_vector(m, spherical_to_cartesian(ra, dec))
ra1, dec1 = cartesian_to_spherical(v)
print(math.degrees(normalize_angle(ra1)), math.degrees(dec1))

pa = parallactic_angle(ha=0.5, dec=dec, phi=math.radians(19.8))
print(math.degrees(pa))
```

Angles are in radians throughout, dates are Modified Julian Dates
(JD - 2400000.5) and distances are in AU unless noted otherwise.

## What it does not do

- There is no table of observatories: site longitudes, latitudes and
  heights must be supplied by the caller.
- There is no command-line tool; the package is a library only.
- Only the old Bessel-Newcomb precession model is provided; there are no
  IAU 1976/2006 precession, nutation, sidereal time or apparent-place
  routines.
- Orbital elements can be computed from a state vector, but there is no
  propagation of elements back to positions and no planetary ephemeris.