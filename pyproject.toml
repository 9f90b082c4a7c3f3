[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "immui"
version = "0.1.0"
description = "Building blocks of a skinnable immediate mode UI: layout cursor, styles, text editing, painting and mesh generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["immediate-mode", "gui", "ui", "layout", "text-editing", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["immui"]

[tool.pytest.ini_options]
addopts = "-ra"
