[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashkit"
version = "0.4.0"
description = "SHA-2 and Areion permutation-based hash functions in plain Python, with MD5 helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "sha256", "sha384", "sha512", "md5", "areion", "permutation", "digest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["hashkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
