[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cstrsearch"
version = "0.1.0"
description = "Search functions for NUL-terminated byte strings with C library semantics"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "bytes", "search", "strstr", "strspn", "nul-terminated"]
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
packages = ["cstrsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
