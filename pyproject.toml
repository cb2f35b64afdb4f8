[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent-solver"
version = "0.1.0"
description = "Solvers for a series of daily programming puzzles, with a command-line runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "grid", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent-solver = "advent_solver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent_solver"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
