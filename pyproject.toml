[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mmmsim"
version = "0.1.0"
description = "Response simulation of third- and fourth-order linear dynamic systems with RK4 and Taylor-series integrators"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "ode", "runge-kutta", "taylor", "control", "step-response"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
mmmsim = "mmmsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mmmsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
