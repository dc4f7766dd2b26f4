[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyftls"
version = "0.1.0"
description = "A minimal directory lister with sorting, hidden-file and recursive options, plus small string, buffer and list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "directory", "listing", "filesystem", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pyftls = "pyftls.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pyftls"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
