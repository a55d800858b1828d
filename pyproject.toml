[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nbtrees"
version = "0.1.0"
description = "Array-backed non-binary trees stored as first-child / next-sibling links, with traversals and ASCII rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "non-binary tree", "first-child next-sibling", "traversal", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
nbtrees = "nbtrees.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nbtrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
