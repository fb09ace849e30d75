[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protobom"
version = "0.1.0"
description = "A format-neutral graph model for Software Bills of Materials, with graph operations, diffing, file storage and a pluggable writer."
requires-python = ">=3.10"
dependencies = []
keywords = ["sbom", "software bill of materials", "spdx", "cyclonedx", "supply chain", "graph"]
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
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["protobom"]

[tool.hatch.build.targets.sdist]
include = ["protobom", "tests", "pyproject.toml"]

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
