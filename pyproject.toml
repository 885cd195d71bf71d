[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miniprintf"
version = "0.1.0"
description = "A small printf with the c, s, p, d, i, u, x, X and % conversions, plus string, character and linked-list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "strings", "linked-list"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
miniprintf-demo = "miniprintf.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["miniprintf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
