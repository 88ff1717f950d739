[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "logicsim"
version = "0.1.0"
description = "Cycle-based digital logic simulator driven by plain-text design and testbench files"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "logic",
    "simulation",
    "digital",
    "circuit",
    "flip-flop",
    "multiplexer",
    "waveform",
    "rtl",
]
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicsim = "logicsim.cli:main"

[tool.setuptools.packages.find]
include = ["logicsim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
