[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gallows"
version = "0.1.0"
description = "A console Hangman game with a Caesar-encrypted word list"
requires-python = ">=3.10"
dependencies = []
keywords = ["hangman", "game", "console", "caesar", "word-game"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gallows = "gallows.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gallows"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
