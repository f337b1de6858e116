[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vardump"
version = "0.1.0"
description = "Width-aware, optionally colourised formatters that turn values into text for debug output"
requires-python = ">=3.10"
dependencies = []
keywords = ["debug", "dump", "pretty-print", "ansi", "formatting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vardump"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
