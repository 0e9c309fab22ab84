[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ezcli"
version = "0.1.0"
description = "A small library for declaring command line options and running them against an argument list."
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "command-line", "options", "argv", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ezcli-example = "ezcli.example:main"

[tool.hatch.build.targets.wheel]
packages = ["ezcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
