[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skypal"
version = "0.9.2"
description = "Positional astronomy helpers: vectors, time and angle conversions, parallactic angle, polar motion, precession and orbital elements"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "astrometry", "precession", "orbital elements", "polar motion", "coordinates"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skypal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
