[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alethvar"
version = "0.1.0"
description = "A turn-based text role-playing game: pick a class, hunt monsters, collect trophies."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "text-adventure", "turn-based", "game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
alethvar = "alethvar.game:main"

[tool.hatch.build.targets.wheel]
packages = ["alethvar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
