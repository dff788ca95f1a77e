[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadsym"
version = "0.1.0"
description = "Scoped symbol tables and quadruple intermediate code for small compilers"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "symbol-table", "quadruples", "intermediate-code", "three-address-code"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
packages = ["quadsym"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
