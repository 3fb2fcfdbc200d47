[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardlang"
version = "0.1.0"
description = "Card trees for a card-based programming language: cards, functions, child access, card indices, errors and the standard library functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "visual-programming", "cards", "ast", "language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cardlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
