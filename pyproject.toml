[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "routefinder"
version = "0.1.0"
description = "Shortest-route finder over a CSV road map of named locations, with stops, detours and saved journeys"
requires-python = ">=3.10"
dependencies = []
keywords = ["dijkstra", "shortest-path", "graph", "routing", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
routefinder = "routefinder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["routefinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
