[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelplay"
version = "0.1.0"
description = "Window-free game and simulation logic for small 2D demos: mazes, platformer physics, particles, starfields, pendulums and more"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "game",
    "2d",
    "maze",
    "particles",
    "platformer",
    "starfield",
    "sudoku",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pixelplay"]

[tool.hatch.build.targets.sdist]
include = [
    "pixelplay",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
