[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paircorr"
version = "0.1.0"
description = "Pair correlation function g2(r) and cumulative coordination Z(r) for periodic particle configurations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pair correlation",
    "radial distribution function",
    "g2",
    "coordination number",
    "particle packing",
    "statistical mechanics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pair-correlation = "paircorr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["paircorr"]

[tool.pytest.ini_options]
addopts = "-ra"
