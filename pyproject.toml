[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskdesk"
version = "0.1.0"
description = "Command-line task manager with SQLite storage, deadline reminders, statistics, HTML reports and an optional Arduino serial link"
requires-python = ">=3.10"
keywords = ["tasks", "todo", "scheduling", "deadlines", "sqlite", "serial", "arduino"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskdesk = "taskdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["taskdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
