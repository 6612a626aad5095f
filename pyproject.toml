[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "securebank"
version = "0.1.0"
description = "Encrypted account ledger with an encrypted transaction log, file encryption and Huffman compression"
requires-python = ">=3.10"
keywords = ["banking", "ledger", "encryption", "aes", "pbkdf2", "huffman"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Archiving :: Compression",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["securebank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
