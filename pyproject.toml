[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fringetree"
version = "0.1.0"
description = "Persistent fringe trees: immutable sequences stored in the leaves of a binary tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "fringe tree", "persistent", "immutable", "sequence", "graphviz", "dot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[project.scripts]
fringetree-demo = "fringetree.demo:main"
fringetree-greet = "fringetree.greetings:main"

[tool.hatch.build.targets.wheel]
packages = ["fringetree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
