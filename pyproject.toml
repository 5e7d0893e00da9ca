[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketgames"
version = "0.1.0"
description = "Terminal minesweeper and tic-tac-toe, a small linked list, and a handful of classic programming drills"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "tic-tac-toe", "terminal", "games", "linked-list", "binary-search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pocketgames-minesweeper = "pocketgames.minesweeper:main"
pocketgames-tictactoe = "pocketgames.tictactoe:main"
pocketgames-linkedlist = "pocketgames.linkedlist:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
