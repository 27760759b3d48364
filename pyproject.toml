[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tiktaktoe"
version = "0.1.0"
description = "Terminal tic-tac-toe with timed turns, a random computer opponent and resizable cells"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "game", "terminal", "ansi", "board-game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tiktaktoe = "tiktaktoe.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tiktaktoe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
