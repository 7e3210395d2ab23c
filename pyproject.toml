[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsatoolbox"
version = "0.1.0"
description = "Command-line toolbox for classic sorting algorithms and graph traversal"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "sorting", "quicksort", "mergesort", "graph", "dfs", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsa-toolbox = "dsatoolbox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsatoolbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
