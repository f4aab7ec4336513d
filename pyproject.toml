[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursorbigint"
version = "0.1.0"
description = "Arbitrary-precision signed integers built on a cursor-based list, with a small arithmetic report command"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "arbitrary precision", "arithmetic", "cursor list", "sequence"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cursorbigint-arithmetic = "cursorbigint.arithmetic:main"

[tool.hatch.build.targets.wheel]
packages = ["cursorbigint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
