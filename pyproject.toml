[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jylib"
version = "0.1.0"
description = "Service helpers: ciphers, coded errors, JWT tokens, password hashing, snowflake ids, geo coordinates, WeChat and Zelos API clients"
requires-python = ">=3.10"
keywords = ["jwt", "snowflake", "bcrypt", "des", "rsa", "gcj02", "wechat"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "pycryptodome",
    "pyjwt",
    "bcrypt",
    "requests",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
    "freezegun",
]

[tool.hatch.build.targets.wheel]
packages = ["jylib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
