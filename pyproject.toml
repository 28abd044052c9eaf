[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigharvest"
version = "0.1.0"
description = "Extract Solidity function, event and error signatures from source and ABI files"
requires-python = ">=3.10"
keywords = ["solidity", "ethereum", "abi", "signature", "selector", "keccak"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sigharvest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
