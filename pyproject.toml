[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monkeylang"
version = "0.1.0"
description = "Lexer, syntax tree nodes and token-printing REPL for the Monkey programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["monkey", "interpreter", "lexer", "tokenizer", "ast", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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

[project.scripts]
monkey = "monkeylang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["monkeylang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
