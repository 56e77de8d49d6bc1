[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tourkit"
version = "0.1.0"
description = "Knight's tour solvers with step-by-step playback, plus tree-layout, viewport and debug-formatting helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "knights-tour",
    "chess",
    "backtracking",
    "warnsdorff",
    "puzzle",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tourkit = "tourkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tourkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
