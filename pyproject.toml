[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kakuro"
version = "0.1.0"
description = "Kakuro puzzle solver with text, JSON and interactive grid loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["kakuro", "puzzle", "solver", "backtracking", "cross-sums"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
kakuro = "kakuro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kakuro"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
