[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazechomp"
version = "1.0.0"
description = "A deterministic, turn-based maze chase game played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "maze", "arcade", "terminal", "ascii", "deterministic"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazechomp = "mazechomp.cli:main"
mazechomp-scenarios = "mazechomp.scenarios:main"

[tool.hatch.build.targets.wheel]
packages = ["mazechomp"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
