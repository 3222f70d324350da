[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triagesim"
version = "0.1.0"
description = "Discrete-event simulation of patients flowing through a hospital emergency department"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "hospital", "triage", "queueing", "stack-distance"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
triagesim = "triagesim.cli:main"
triagesim-recency = "triagesim.recency:main"

[tool.hatch.build.targets.wheel]
packages = ["triagesim"]

[tool.pytest.ini_options]
addopts = "-ra"
