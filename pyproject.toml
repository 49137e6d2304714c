[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thornbase"
version = "0.1.0"
description = "Small game-engine base library: text console with printf formatting, PCG random numbers, hashing, vector and quaternion math."
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "printf", "pcg", "murmur3", "vector", "quaternion", "matrix", "game"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["thornbase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
