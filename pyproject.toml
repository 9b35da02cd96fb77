[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdbqtdock"
version = "0.1.0"
description = "Atom typing tables, quaternions and conformation primitives for molecular docking"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "docking",
    "molecular-docking",
    "autodock-types",
    "quaternion",
    "conformation",
    "chemistry",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pdbqtdock"]

[tool.hatch.build.targets.sdist]
include = [
    "pdbqtdock",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
