[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pycos"
version = "0.1.0"
description = "Building blocks for reading Carousel Object System (PDF) data: character classes, a scanner, containers, diagnostics and stream decoders."
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "cos", "ascii85", "asciihex", "run-length", "decoder", "containers", "scanner"]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pycos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
