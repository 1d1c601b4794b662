[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adept"
version = "0.1.0"
description = "Building blocks for electromagnetic particle transport: units, RANLUX++ random numbers, benchmarking timers and calorimeter scoring"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "particle transport", "ranlux", "random numbers", "benchmarking", "calorimeter", "simulation"]
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adept"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
