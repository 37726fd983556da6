[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adtkit"
version = "0.1.0"
description = "Cursor lists, arbitrary-precision integers and ordered dictionaries, with small command-line tools built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cursor list",
    "big integer",
    "binary search tree",
    "red-black tree",
    "dictionary",
    "perfect shuffle",
    "word frequency",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adtkit-arithmetic = "adtkit.arithmetic:main"
adtkit-shuffle = "adtkit.shuffle:main"
adtkit-order = "adtkit.order:main"
adtkit-wordfreq = "adtkit.word_frequency:main"

[tool.hatch.build.targets.wheel]
packages = ["adtkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
