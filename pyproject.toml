[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "urbangen"
version = "0.1.1"
description = "Geometry primitives and area subdivision for procedural city generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "polygon", "procedural", "city", "subdivision", "urban"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["urbangen"]

[tool.pytest.ini_options]
addopts = "-ra"
