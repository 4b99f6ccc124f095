[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "brickgame"
version = "1.0.1"
description = "A falling-block puzzle game for the terminal, with a curses interface and a high-score table"
requires-python = ">=3.10"
dependencies = []
keywords = ["falling blocks", "game", "puzzle", "curses", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
brickgame = "brickgame.app:main"

[tool.setuptools.packages.find]
include = ["brickgame*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
