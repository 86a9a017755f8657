[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokelink"
version = "0.1.0"
description = "A tile-matching puzzle game: connect pairs of identical creatures with paths of at most two turns."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "tile-matching", "pygame", "onet"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pokelink = "pokelink.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pokelink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
