[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "omwkit"
version = "0.3.1a0"
description = "General purpose helpers: fixed-width bit shifts, Levenshtein distance, semantic versions and ANSI escape sequences"
requires-python = ">=3.10"
dependencies = []
keywords = ["semver", "version", "ansi", "escape-sequences", "levenshtein", "bit-shift", "terminal"]
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
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["omwkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
