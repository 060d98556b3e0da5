[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feabi"
version = "0.1.0"
description = "Build Ethereum JSON ABIs from Fe contract module definitions"
requires-python = ">=3.10"
keywords = ["fe", "ethereum", "abi", "compiler", "smart-contracts", "keccak"]
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
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["feabi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
