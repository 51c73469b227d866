[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nopain"
version = "0.1.0"
description = "Small everyday helpers: conversions, padding, dates and times, hashing, tokens, files, archives and downloads."
requires-python = ">=3.10"
dependencies = [
    "bcrypt",
]
keywords = [
    "utilities",
    "conversion",
    "datetime",
    "base64",
    "md5",
    "bcrypt",
    "files",
    "zip",
    "download",
]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
    "freezegun",
]

[tool.hatch.build.targets.wheel]
packages = ["nopain"]

[tool.hatch.build.targets.sdist]
include = [
    "nopain",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
