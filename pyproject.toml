[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "vecops"
version = "0.1.0"
description = "Typed numeric vectors with element-wise sums, scalar products and a plain-text file format"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "linear algebra", "scalar product", "dot product"]
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
vecops = "vecops.cli:main"

[tool.setuptools.packages.find]
include = ["vecops*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
