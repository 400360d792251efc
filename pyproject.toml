[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokuforge"
version = "0.1.0"
description = "Generate, solve and punch sudoku puzzles on square grids, including jigsaw layouts"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "puzzle", "solver", "generator", "jigsaw"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Environment :: Console",
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
sudokuforge = "sudokuforge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokuforge"]

[tool.pytest.ini_options]
addopts = "-ra"
