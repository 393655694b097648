[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "axiomsim"
version = "0.0.1"
description = "Deterministic grid-world simulation core with tick-boundary command processing and overflow-safe fixed-point arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "deterministic", "fixed-point", "grid", "tick", "commands", "checksum"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
axiomsim-headless = "axiomsim.headless:main"

[tool.hatch.build.targets.wheel]
packages = ["axiomsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
