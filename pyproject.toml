[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapekit"
version = "0.1.0"
description = "Area and volume of circles, spheres, cubes and prisms computed in fixed-width integer or single-precision float number kinds"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "shapes", "area", "volume", "numeric", "fixed-width"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shapekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
