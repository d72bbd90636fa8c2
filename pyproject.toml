[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "babarules"
version = "0.1.0"
description = "Rule engine for a tile-based word puzzle: text tiles on a grid form sentences that give objects their properties."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "rules", "grid", "tiles", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
babarules = "babarules.console:main"

[tool.hatch.build.targets.wheel]
packages = ["babarules"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
