[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gaemi"
version = "0.1.0"
description = "Core game engine services: logging, math, memory accounting, events, timing and input state."
requires-python = ">=3.10"
keywords = ["game", "engine", "events", "input", "gamepad", "math"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gaemi"]

[tool.pytest.ini_options]
addopts = "-ra"
