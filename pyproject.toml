[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datacomptroller"
version = "1.0"
description = "A small log collection server that receives messages over TCP and writes them to files"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "log collector", "tcp", "server"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datacomptroller = "datacomptroller.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datacomptroller"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
