[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numfile"
version = "0.1.0"
description = "Interactive tool for managing a file of integers: fill, sort, and search it linearly or by binary search"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search", "linear search", "bubble sort", "education", "integers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numfile = "numfile.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numfile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
