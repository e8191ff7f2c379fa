[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compgeo"
version = "0.1.0"
description = "2D computational geometry helpers: points, strokes, a quadtree index and path unscrambling."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "quadtree", "spatial index", "strokes", "arcs", "paths"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["compgeo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
