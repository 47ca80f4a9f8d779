[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patterngallery"
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
    "command",
    "visitor",
    "interpreter",
    "examples",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patterngallery-strategy = "patterngallery.strategy:main"
patterngallery-command = "patterngallery.command:main"
patterngallery-decorator = "patterngallery.decorator:main"
patterngallery-template = "patterngallery.template:main"
patterngallery-factory = "patterngallery.factory:main"
patterngallery-observer = "patterngallery.observer:main"
patterngallery-interpreter = "patterngallery.interpreter:main"
patterngallery-visitor = "patterngallery.visitor:main"

[tool.hatch.build.targets.wheel]
packages = ["patterngallery"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
