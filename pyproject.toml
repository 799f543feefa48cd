[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raetsel"
version = "0.1.0"
description = "Solver for letter-extraction word puzzles: arrange known answers and search dictionaries for the hidden words"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "riddle", "solver", "dictionary", "anagram", "trie"]
classifiers = [
    "Development Status :: 4 - Beta",
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
raetsel = "raetsel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["raetsel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
