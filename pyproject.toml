[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rupert"
version = "0.1.0"
description = "Exact rational geometry, interval arithmetic and SVG rendering for exploring the Rupert property of polyhedra"
requires-python = ">=3.10"
keywords = ["rupert", "polyhedron", "interval arithmetic", "quaternion", "geometry", "svg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rupert = "rupert.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rupert"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
