[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockstate"
version = "0.1.0"
description = "Docking layout model: surfaces, binary split trees and tabs for dockable user interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["docking", "tabs", "layout", "split", "tree", "ui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dockstate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
