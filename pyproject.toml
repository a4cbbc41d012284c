[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixwire"
version = "0.1.0"
description = "Building blocks for FIX protocol data: field values, SOFH framing, FIX JSON encoding, FIXS cipher suites and session rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["fix", "financial", "trading", "sofh", "fixs", "protocol", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["fixwire"]

[tool.hatch.build.targets.sdist]
include = ["fixwire", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
