[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinylibc"
version = "0.1.0"
description = "String, number-parsing, printf-style formatting, scanning and hexdump routines with the exact behaviour of a small freestanding C library"
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "printf", "sscanf", "strtol", "ctype", "hexdump", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinylibc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
