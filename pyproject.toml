[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdpquest"
version = "0.1.0"
description = "A small turn-based role-playing game for the terminal, with battles, dungeons, loot and save slots."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "roguelike", "terminal", "text-adventure"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rdpquest = "rdpquest.game:main"
rdpquest-pt = "rdpquest.pt.game:main"

[tool.hatch.build.targets.wheel]
packages = ["rdpquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
