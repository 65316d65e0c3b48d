[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "boxpush"
version = "0.1.0"
description = "A terminal box-pushing warehouse puzzle played with the arrow keys"
requires-python = ">=3.10"
dependencies = []
keywords = ["sokoban", "puzzle", "game", "curses", "terminal"]
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
boxpush = "boxpush.game:main"
boxpush-menu = "boxpush.menu:main"

[tool.setuptools.packages.find]
include = ["boxpush*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
