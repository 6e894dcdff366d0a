[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foodnote"
version = "0.1.0"
description = "A small console notebook for food recipes kept in a CSV file"
requires-python = ">=3.10"
dependencies = []
keywords = ["recipe", "cooking", "csv", "console", "notes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
foodnote = "foodnote.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["foodnote"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
