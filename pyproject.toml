[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "traceui"
version = "0.1.0"
description = "Building blocks for trace viewers: a TinyLFU cache, background futures, command palette filtering, scrollbar geometry and control state"
requires-python = ">=3.10"
dependencies = []
keywords = ["tinylfu", "cache", "count-min sketch", "bloom filter", "linked list", "command palette", "futures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["traceui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
