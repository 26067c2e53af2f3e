[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zcalc"
version = "0.1.0"
description = "Linear AC/DC circuit analysis with phasors, superposition and Bode plots rendered to SVG/HTML"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "circuit",
    "electronics",
    "impedance",
    "phasor",
    "kirchhoff",
    "superposition",
    "bode",
    "network analysis",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zcalc-examples = "zcalc.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["zcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
