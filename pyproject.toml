[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedkit"
version = "0.1.0"
description = "Linked-list algorithms and list-backed data structures: caches, a cursor text editor, a key counter and a doubly linked list."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "lru", "lfu", "cache", "sorting", "data structures"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkedkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
