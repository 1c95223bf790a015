[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marytree"
version = "0.1.0"
description = "Lock, unlock and upgrade nodes of a complete m-ary tree, with a query runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "m-ary", "locking", "hierarchy", "concurrency"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
marytree = "marytree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["marytree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
