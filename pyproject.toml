[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphorder"
version = "0.1.0"
description = "Graph vertex reordering for cache locality: Gorder, reverse Cuthill-McKee, Rabbit Order and supporting graph utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "reordering", "gorder", "rabbit-order", "rcm", "locality", "csr", "community-detection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[project.scripts]
graphorder-gorder = "graphorder.gorder_cli:main"
graphorder-rabbit = "graphorder.rabbit_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphorder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
