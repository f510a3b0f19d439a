[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wardsim"
version = "0.1.0"
description = "Cycle-based simulation of a hospital ward: waiting queue, beds and discharges"
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "simulation", "queue", "deque", "hash table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wardsim = "wardsim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["wardsim"]

[tool.pytest.ini_options]
addopts = "-ra"
