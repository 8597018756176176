[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmdgames"
version = "0.1.0"
description = "Terminal tic-tac-toe with a simple AI, plus ANSI console drawing and C-style string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "game", "console", "terminal", "ansi"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cmdgames-tictactoe = "cmdgames.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cmdgames"]

[tool.pytest.ini_options]
addopts = "-ra"
