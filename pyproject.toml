[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gdrivekit"
version = "0.1.0"
description = "Helpers for a cloud drive client: path handling, checksums, file encryption, progress reporting, error classification, logging and release tagging"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["drive", "cloud-storage", "checksum", "encryption", "progress", "release"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: File Transfer Protocol (FTP)",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gdrivekit-release = "gdrivekit.release:main"

[tool.hatch.build.targets.wheel]
packages = ["gdrivekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
