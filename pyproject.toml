[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankqueue"
version = "0.1.0"
description = "A bank ticket queue with a small interactive menu, built on a singly linked list and stack."
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "stack", "linked list", "bank", "ticket"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
bankqueue = "bankqueue.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bankqueue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
