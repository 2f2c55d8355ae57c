[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ptools"
version = "0.4.3"
description = "Text formatting helpers, bit flags, a block memory pool, bounded containers, HTTP request head parsing and an event-based JSON scanner with a node tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["memory-pool", "json", "http", "formatting", "containers", "bit-flags"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ptools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
