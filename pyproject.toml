[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keybounds"
version = "0.1.0"
description = "Iteration bounds for lexicographically ordered byte-string keys: ranges, prefix ranges and prefix successors."
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "range", "prefix", "bounds", "iteration", "bytes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["keybounds"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
