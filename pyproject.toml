[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schedulify"
version = "1.0.0"
description = "Build every clash-free weekly timetable from a course database and a list of chosen courses."
requires-python = ">=3.10"
dependencies = []
keywords = ["schedule", "timetable", "courses", "university", "planner"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schedulify = "schedulify.app:main"

[tool.hatch.build.targets.wheel]
packages = ["schedulify"]

[tool.pytest.ini_options]
addopts = "-ra"
