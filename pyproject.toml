[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atlasutil"
version = "0.5.0"
description = "Small utilities for Kubernetes operators: JSON copying and merging, Kubernetes name normalization, identifier-based set operations, ISO 8601 parsing and HTTP session decoration."
requires-python = ">=3.10"
keywords = ["kubernetes", "operator", "iso8601", "json", "http", "digest-auth"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["atlasutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
