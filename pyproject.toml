[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linekit"
version = "0.1.0"
description = "Line editing core: a grapheme-aware text buffer with word and line motions, an undo/redo stack and a clipboard."
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["line editor", "readline", "text buffer", "grapheme", "undo", "vi", "emacs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["linekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
