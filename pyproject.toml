[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapegames"
version = "0.1.0"
description = "Small pygame games and scenes: tic-tac-toe against the computer, a shape memory game and simple drawing demos"
requires-python = ">=3.10"
keywords = ["pygame", "games", "tic-tac-toe", "memory", "concentration", "shapes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shapegames-tictactoe = "shapegames.tictactoe_app:main"
shapegames-memory = "shapegames.memory_app:main"
shapegames-labs = "shapegames.labs:main"

[tool.hatch.build.targets.wheel]
packages = ["shapegames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
