[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catman"
version = "0.0.1"
description = "A small package manager that fetches, installs and tracks packages from a remote package index"
requires-python = ">=3.10"
dependencies = []
keywords = ["package-manager", "installer", "cli"]
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
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
catman = "catman.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["catman"]

[tool.pytest.ini_options]
addopts = "-ra"
