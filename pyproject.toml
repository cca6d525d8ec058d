[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stockroom"
version = "0.1.0"
description = "A small inventory keeper with role-based user accounts, stored in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "stock", "warehouse", "users", "roles", "command-line"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stockroom = "stockroom.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stockroom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
