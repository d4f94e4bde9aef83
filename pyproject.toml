[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yloc"
version = "0.1.0"
description = "Hardware topology graph with pluggable information modules, a typed component hierarchy and graph queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["topology", "hardware", "hpc", "graph", "affinity", "mpi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yloc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
