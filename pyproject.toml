[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tclib"
version = "0.1.0"
description = "Small utility library: ASCII character classes, paths, checksums, digests, HTML entities and option scanning"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "ctype", "crc32", "md2", "luhn", "html", "basename", "dirname", "arguments", "adif"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tclib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
