[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mm1sim"
version = "0.1.0"
description = "Discrete-event simulation of a single-server queue with a time-ordered future event list"
requires-python = ">=3.10"
dependencies = []
keywords = ["queueing", "simulation", "discrete-event", "mm1", "operations-research"]
classifiers = [
    "Development Status :: 4 - Beta",
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
mm1sim = "mm1sim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mm1sim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
