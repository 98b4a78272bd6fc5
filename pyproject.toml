[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qtelab"
version = "0.1.0"
description = "Building blocks for exploring quantum time evolution: Hermitian matrices, harmonic oscillator Hamiltonians, eigen-decomposition and state development."
requires-python = ">=3.10"
keywords = ["quantum", "hermitian", "eigenvalues", "harmonic-oscillator", "time-evolution"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["qtelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
