[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qsim"
version = "0.1.0"
description = "A small quantum circuit simulator driven by plain-text state and circuit files"
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "qubit", "circuit", "simulator", "complex", "matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qsim = "qsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
