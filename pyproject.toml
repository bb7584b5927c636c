[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tailorsim"
version = "1.9.0"
description = "Settings, triangle meshes, geodesic distances and OBJ export for position-based cloth simulation"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["cloth", "simulation", "mesh", "geodesic", "obj", "physics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tailorsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
