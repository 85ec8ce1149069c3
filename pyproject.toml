[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsl"
version = "0.1.0"
description = "Scanner, syntax tree, bytecode chunks and disassembler for a small scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "bytecode", "scanner", "lexer", "syntax-tree", "disassembler"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
