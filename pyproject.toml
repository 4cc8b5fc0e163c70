[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asha"
version = "0.1.0"
description = "Lexer, parser and diagnostics for a small dependently typed language, with a framebuffer text console model"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "dependent types", "framebuffer", "tty"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["asha"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
