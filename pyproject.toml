[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spirecards"
version = "0.1.0"
description = "A small turn-based deck-building card battle game"
requires-python = ">=3.10"
keywords = ["game", "card game", "deck building", "turn based", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spirecards = "spirecards.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spirecards"]

[tool.pytest.ini_options]
addopts = "-ra"
