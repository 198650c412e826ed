[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adaio"
version = "0.1.0"
description = "Client objects for an IoT data service: feeds, groups and time topics over MQTT and HTTP"
requires-python = ">=3.10"
dependencies = []
keywords = ["iot", "mqtt", "feeds", "csv", "home-automation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adaio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
