[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlekit"
version = "0.1.0"
description = "Classic algorithm puzzles solved as plain, tested Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-search",
    "heaps",
    "strings",
    "linked-lists",
    "trees",
    "puzzles",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puzzlekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
