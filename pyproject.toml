[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chardiff"
version = "0.1.0"
description = "Character-level diff of two strings using the Myers O(ND) algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = ["diff", "myers", "edit-script", "edit-distance", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chardiff = "chardiff.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chardiff"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
