[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "impulse2d"
version = "1.0.0"
description = "A small impulse-based 2D rigid body physics engine with circles and convex polygons"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "2d", "rigid body", "collision", "impulse", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["impulse2d*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
