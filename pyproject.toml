[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkit"
version = "0.1.0"
description = "Thread-safe collections, functional options and terminal styling helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["thread-safe", "map", "set", "queue", "options", "tui", "ansi", "catppuccin"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
