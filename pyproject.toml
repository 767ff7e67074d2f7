[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexboard"
version = "0.1.0"
description = "Read Hex board positions drawn as text and answer questions about them"
requires-python = ">=3.10"
dependencies = []
keywords = ["hex", "board game", "game analysis", "connection game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hexboard = "hexboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hexboard"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
