[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "accelutil"
version = "0.1.0"
description = "Building blocks for accelerator configuration tools: size and device-name parsing, bitmaps, sysfs attributes, logging, diagnostics and command dispatch."
requires-python = ">=3.10"
dependencies = []
keywords = ["accelerator", "sysfs", "bitmap", "cli", "configuration", "devices"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Systems Administration",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["accelutil"]

[tool.hatch.build.targets.sdist]
include = ["accelutil", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
