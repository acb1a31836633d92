[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbadraw"
version = "0.1.0"
description = "Digit drawing pad model, image preprocessing and GBA ROM header fixing tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["gba", "gameboy-advance", "rom", "header", "mnist", "image-processing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gbafix = "gbadraw.gbafix:main"

[tool.hatch.build.targets.wheel]
packages = ["gbadraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
