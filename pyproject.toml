[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "explc"
version = "0.1.0"
description = "Typed syntax trees, a symbol table, an interpreter and expression code generation for a small teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "abstract syntax tree",
    "expression tree",
    "interpreter",
    "symbol table",
    "labels",
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
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["explc"]

[tool.hatch.build.targets.sdist]
include = ["explc", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
