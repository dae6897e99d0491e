[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopatterns"
version = "0.1.0"
description = "Classic algorithm patterns: arrays, two pointers, sliding windows, dynamic programming, hashing, stacks, queues, prefix sums, strings, linked lists, grids and trees."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "dynamic programming", "linked lists", "binary trees", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algopatterns"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
