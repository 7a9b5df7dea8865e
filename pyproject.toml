[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "otpad"
version = "1.0.0"
description = "One-time pad encryption over TCP: key generator, encryption and decryption servers and clients"
requires-python = ">=3.10"
dependencies = []
keywords = ["one-time pad", "cipher", "encryption", "socket", "server"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
otpad-keygen = "otpad.keygen:main"
otpad-enc-server = "otpad.server:enc_main"
otpad-dec-server = "otpad.server:dec_main"
otpad-enc-client = "otpad.client:enc_main"
otpad-dec-client = "otpad.client:dec_main"

[tool.hatch.build.targets.wheel]
packages = ["otpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
