"""Positional astronomy helpers: vectors, time conversions, sky geometry, precession and orbits."""

__version__ = "0.9.2"

__all__ = [
    "vectors",
    "timeconv",
    "sky",
    "precession",
    "orbits",
]