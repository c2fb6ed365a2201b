[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wrike"
version = "0.1.0"
description = "Client for version 4 of the Wrike REST API: folders, tasks, groups, workflows, custom fields, accounts, contacts and users."
requires-python = ">=3.10"
dependencies = []
keywords = ["wrike", "api", "client", "project management", "tasks", "groupware"]
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
    "Topic :: Office/Business :: Groupware",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wrike"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
