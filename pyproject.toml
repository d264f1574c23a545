[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "dungeonrpg"
version = "0.1.0"
description = "A small text-based dungeon crawler role-playing game for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "dungeon", "text adventure", "game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
dungeonrpg = "dungeonrpg.cli:main"

[tool.setuptools.packages.find]
include = ["dungeonrpg*"]

[tool.pytest.ini_options]
addopts = "-ra"
