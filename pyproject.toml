[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "pokegame"
version = "0.1.0"
description = "A terminal arcade game: roam a board and chain captures of wandering pokemon loaded from a CSV pokedex."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "arcade", "pokemon", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokegame = "pokegame.cli:main"

[tool.setuptools]
packages = ["pokegame"]

[tool.pytest.ini_options]
addopts = "-ra"
