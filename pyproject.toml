[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazearena"
version = "0.1.0"
description = "Small grid maze games for trying out game-playing search algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "maze",
    "game",
    "search",
    "beam-search",
    "greedy",
    "game-ai",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazearena-wallmaze = "mazearena.wallmaze_play:main"
mazearena-wallmaze-bench = "mazearena.wallmaze_bench:main"

[tool.hatch.build.targets.wheel]
packages = ["mazearena"]

[tool.hatch.build.targets.sdist]
include = ["mazearena", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
