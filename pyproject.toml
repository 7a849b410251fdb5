[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httpinger"
version = "0.1.0"
description = "Ping a web server over HTTP(S) and report response statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "ping", "latency", "monitoring", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
httpinger = "httpinger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["httpinger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
