[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskdesk"
version = "0.1.0"
description = "Small terminal tools: a task manager, a to-do list, a number-guessing game and a few basic examples"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "cli", "terminal", "game"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskdesk-tasks = "taskdesk.tasks:main"
taskdesk-todo = "taskdesk.todo:main"
taskdesk-guess = "taskdesk.guessing:main"
taskdesk-basics = "taskdesk.basics:main"

[tool.hatch.build.targets.wheel]
packages = ["taskdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
