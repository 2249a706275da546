[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ringrun"
version = "0.1.0"
description = "Game rules for a tile-based side-scroller: obstacle grids, player physics, an enemy, level layouts, menu navigation and a leaderboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scroller", "tile-map", "leaderboard"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ringrun"]

[tool.pytest.ini_options]
addopts = "-ra"
