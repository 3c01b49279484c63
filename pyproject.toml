[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "campusdesk"
version = "0.1.0"
description = "A small in-memory model of a university campus: users, courses, grades, attendance and events"
requires-python = ">=3.10"
dependencies = []
keywords = ["university", "campus", "courses", "grades", "attendance", "education"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
campusdesk = "campusdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["campusdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
