[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retrokit"
version = "0.1.0"
description = "Path manipulation, UTF conversion and file stream helpers for emulator frontends and cores"
requires-python = ">=3.10"
dependencies = []
keywords = ["paths", "utf-8", "utf-16", "file streams", "archives", "emulation"]
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["retrokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
