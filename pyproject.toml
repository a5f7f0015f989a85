[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazewalk"
version = "0.1.0"
description = "Load text mazes and watch a depth-first or threaded walker search them for the exit"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "depth-first search", "threads", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
mazewalk = "mazewalk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mazewalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
