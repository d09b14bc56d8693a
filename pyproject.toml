[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cavecrawl"
version = "0.1.0"
description = "A text-driven cave exploration adventure with items, save points and a console front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text adventure", "role-playing", "console", "dungeon"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
cavecrawl = "cavecrawl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cavecrawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
