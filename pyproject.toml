[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enshamir"
version = "0.1.0"
description = "Encrypt a secret with a password and split it into Shamir secret shares"
requires-python = ">=3.10"
dependencies = [
    "cryptography>=44.0",
]
keywords = ["shamir", "secret-sharing", "argon2id", "aes-gcm", "encryption", "backup"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Archiving :: Backup",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
enshamir = "enshamir.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["enshamir"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
