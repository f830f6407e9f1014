[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslabs"
version = "0.1.0"
description = "Small data-structure and image-processing exercises: images, recursion, stacks and queues, linked lists, deques and binary trees"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "education",
    "data structures",
    "binary tree",
    "linked list",
    "deque",
    "stack",
    "queue",
    "image processing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dslabs-intro = "dslabs.lab_intro:main"
dslabs-trees = "dslabs.trees_demo:main"
dslabs-deque = "dslabs.deque:main"

[tool.hatch.build.targets.wheel]
packages = ["dslabs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
