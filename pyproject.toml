[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestlib"
version = "0.1.0"
description = "Data structures and 2-D geometry routines for algorithmic problem solving"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "segment-tree",
    "fenwick-tree",
    "treap",
    "trie",
    "geometry",
    "convex-hull",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contestlib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
