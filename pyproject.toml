[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labstructs"
version = "0.1.0"
description = "Classic abstract data types: indexed list, sparse matrix, heap, k-way merge and ordered multidictionary"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "indexed list",
    "sparse matrix",
    "heap",
    "priority queue",
    "binary search tree",
    "multidict",
    "k-way merge",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["labstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
