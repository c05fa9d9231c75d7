[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mysudo"
version = "0.1.0"
description = "A minimal sudo-like tool that checks a user's password against the shadow file and runs a command as root"
requires-python = ">=3.10"
keywords = ["sudo", "shadow", "privileges", "authentication", "printf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration :: Authentication/Directory",
]
dependencies = [
    "passlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
my_sudo = "mysudo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mysudo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
