[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "busybin"
version = "0.1.0"
description = "A small multi-call toolbox of POSIX-style utilities and a minimal shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["posix", "shell", "coreutils", "multi-call", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
busybin = "busybin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["busybin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
