[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maajwtcheck"
version = "0.1.0"
description = "Check an attestation JWT: fetch its signing key set and look for the embedded enclave quote extension in the signing certificate."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "jwt",
    "jwks",
    "attestation",
    "x509",
    "base64",
    "enclave",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
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
test = [
    "pytest",
]

[project.scripts]
maavalidatejwt = "maajwtcheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["maajwtcheck"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"
