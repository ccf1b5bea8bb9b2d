[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pidsandbox"
version = "0.1.0"
description = "A grid sandbox where a PID-controlled bot follows an A* path through obstacles and wind"
requires-python = ">=3.10"
keywords = ["pid", "pathfinding", "a-star", "simulation", "sandbox", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pidsandbox = "pidsandbox.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pidsandbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
