[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labgame"
version = "0.1.0"
description = "A small labyrinth game: dodge the chasing enemies on a grid maze with a pixel-frame minimap."
requires-python = ">=3.10"
keywords = ["game", "labyrinth", "maze", "pathfinding", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
labgame = "labgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["labgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
