[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonemit"
version = "0.1.0"
description = "JSON serializer for Python values with pluggable compact and pretty formatters"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "serializer", "formatter", "pretty-print", "escaping"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonemit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
