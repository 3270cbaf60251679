[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlesolvers"
version = "0.1.0"
description = "Solutions to classic programming-practice puzzles, usable as a library or from the command line."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "algorithms", "practice", "exercises", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puzzlesolvers = "puzzlesolvers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlesolvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
