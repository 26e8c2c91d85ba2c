[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "devcore"
version = "1.2.4"
description = "Hex and big-endian helpers, difficulty targets, fixed-size hashes, console logging and restartable worker threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["hex", "hash", "difficulty", "target", "worker", "logging"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["devcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
