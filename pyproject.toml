[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Operating-system exercises: a bounded channel, number and vector values, a pipe pipeline of arithmetic stages, and a process killer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "processes",
    "pipes",
    "pipeline",
    "channel",
    "threads",
    "signals",
    "procfs",
    "vector",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslab-libdemo = "oslab.libdemo:main"
oslab-stage = "oslab.stages:main"
oslab-pipeline = "oslab.pipeline:main"
oslab-killer = "oslab.killer:main"
oslab-user = "oslab.user:main"

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.hatch.build.targets.sdist]
include = ["oslab", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
