[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "minirel"
version = "0.1.0"
description = "Building blocks of a small relational engine: slotted pages, run-based sorting, hash partitioning, relation printing and query parse trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "database",
    "relational",
    "slotted-page",
    "external-sort",
    "hash-partitioning",
    "query-language",
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
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["minirel*"]

[tool.pytest.ini_options]
addopts = "-ra"
