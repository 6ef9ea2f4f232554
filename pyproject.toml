[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argtab"
version = "0.1.0"
description = "Building blocks for command-line option parsing: typed options, getopt-style scanning and error reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["command-line", "options", "getopt", "argument-parsing", "strptime"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["argtab"]

[tool.pytest.ini_options]
addopts = "-ra"
