[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olympiad"
version = "0.1.0"
description = "Solutions to classic programming-olympiad problems as a plain Python library"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "olympiad",
    "dynamic-programming",
    "data-structures",
    "union-find",
    "string-matching",
]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["olympiad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
