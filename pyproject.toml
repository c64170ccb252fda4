[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "collectkit"
version = "0.1.0"
description = "Generic list and map containers: array and linked lists, a lock-guarded list wrapper, and dict-backed, hash, tree, linked and multi maps."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "collections",
    "containers",
    "list",
    "linked-list",
    "hashmap",
    "treemap",
    "linkedmap",
    "multimap",
]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["collectkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
