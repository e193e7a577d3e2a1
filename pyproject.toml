[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mimefield"
version = "0.1.0"
description = "Parse and format MIME header field parameters such as name=value pairs."
requires-python = ">=3.10"
dependencies = []
keywords = ["mime", "email", "header", "parameter", "rfc2045"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mimefield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
