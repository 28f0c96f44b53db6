[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knowhere"
version = "0.1.0"
description = "Vector search building blocks: metric names, range-result filtering, bitsets, normalisation, recall evaluation and benchmark data set names"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["vector search", "nearest neighbor", "range search", "metric", "recall", "bitset"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["knowhere"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
