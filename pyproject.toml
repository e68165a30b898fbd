[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mansionquest"
version = "0.1.0"
description = "A console detective game: explore a mansion, collect clues and accuse a suspect."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text-adventure", "detective", "binary-tree", "hash-table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mansionquest-novice = "mansionquest.novice:main"
mansionquest-adventurer = "mansionquest.adventurer:main"
mansionquest-master = "mansionquest.master:main"

[tool.hatch.build.targets.wheel]
packages = ["mansionquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
