[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algorecipes"
version = "0.1.0"
description = "Classic algorithm exercises on linked lists, binary trees, arrays and strings, written as plain Python functions."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "linked list",
    "binary tree",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algorecipes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
