[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Algorithms and data structures: modular arithmetic, number theory, geometry, graphs, range queries and tree queries."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "modular-arithmetic",
    "convex-hull",
    "lca",
    "range-minimum-query",
    "segment-tree",
    "graph",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.hatch.build.targets.sdist]
include = ["algokit", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
