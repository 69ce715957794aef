[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rlzpy"
version = "0.1.0"
description = "Relative Lempel-Ziv factorization of 64-bit integer sequences against a sampled reference"
requires-python = ">=3.10"
dependencies = []
keywords = ["rlz", "lempel-ziv", "compression", "suffix array", "factorization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rlz = "rlzpy.compress_cli:main"
random-integers = "rlzpy.random_integers:main"

[tool.hatch.build.targets.wheel]
packages = ["rlzpy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
