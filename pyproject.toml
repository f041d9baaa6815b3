[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aigtasks"
version = "0.1.0"
description = "And-inverter graph (AAG) circuit reader and reporter, plus a hash/heap based task load balancer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "aig",
    "aag",
    "aiger",
    "and-inverter graph",
    "netlist",
    "circuit",
    "min-heap",
    "hash set",
    "task scheduling",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aigtasks-dofile = "aigtasks.dofile:main"

[tool.hatch.build.targets.wheel]
packages = ["aigtasks"]

[tool.hatch.build.targets.sdist]
include = ["aigtasks", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
