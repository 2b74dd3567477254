[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternpad"
version = "0.1.0"
description = "Small, runnable examples of classic object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "strategy",
    "observer",
    "decorator",
    "factory",
    "singleton",
    "command",
    "template method",
    "iterator",
    "composite",
    "state",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternpad = "patternpad.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["patternpad"]

[tool.pytest.ini_options]
addopts = "-ra"
