[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "buildingstore"
version = "0.1.0"
description = "Product and supplier management for a building-materials store, backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "products", "suppliers", "store", "sqlite"]
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
    "Topic :: Office/Business",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["buildingstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
