[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "temprecycle"
version = "1.0.0"
description = "Scan the TEMP folder, report file and folder counts and total size, and optionally clean it."
requires-python = ">=3.10"
dependencies = []
keywords = ["temp", "cleanup", "disk", "console", "files"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
temprecycle = "temprecycle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["temprecycle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
