[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exatheme"
version = "0.1.0"
description = "Terminal colour themes for file listings, configurable through LS_COLORS and EXA_COLORS"
requires-python = ">=3.10"
keywords = ["ls_colors", "exa_colors", "ansi", "terminal", "colours", "theme"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["exatheme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
