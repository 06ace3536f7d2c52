[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zerg"
version = "0.1.0"
description = "Utilities for strings, numbers, time, shell commands and small data structures."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "time", "strings", "dag", "bitmap", "sorted set", "deque"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zerg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
