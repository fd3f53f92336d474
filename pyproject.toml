[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bggelaborate"
version = "0.1.0"
description = "Fill a CSV of board game titles with player counts, play times and ages from the BoardGameGeek XML API"
requires-python = ">=3.10"
keywords = ["boardgames", "boardgamegeek", "csv", "xmlapi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Utilities",
]
dependencies = [
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[project.scripts]
bggelaborate = "bggelaborate.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bggelaborate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
