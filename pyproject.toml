[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlsxcore"
version = "0.1.0"
description = "Building blocks for Office Open XML spreadsheet parts: formats, rich strings, shared strings, relationships and helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["xlsx", "spreadsheet", "ooxml", "excel", "shared strings", "cell format"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xlsxcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
