[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "appmusica"
version = "0.1.0"
description = "Catalogue of songs, artists, subscribers and song plays kept in fixed-size binary record files"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "catalogue", "subscribers", "records", "binary files"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["appmusica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
