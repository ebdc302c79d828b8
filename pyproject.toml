[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventplanner"
version = "0.1.0"
description = "A small interactive event planner with upcoming-event notices and plain-text storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["events", "planner", "calendar", "scheduling", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eventplanner = "eventplanner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eventplanner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
