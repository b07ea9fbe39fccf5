[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monefy"
version = "0.1.0"
description = "Personal expense tracking: an SQLite-backed HTTP JSON server, an interactive console client, and a set of small practice exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["expenses", "budget", "accounting", "bank", "buckets", "http", "json", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
monefy-server = "monefy.server.app:main"
monefy-client = "monefy.client.console:main"

[tool.hatch.build.targets.wheel]
packages = ["monefy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
