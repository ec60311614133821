[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xenochat"
version = "0.1.0"
description = "Multi-platform chat collaborator core: message model, adapters, safety guard, tools, triggers and plugins"
requires-python = ">=3.10"
keywords = ["chat", "bot", "adapters", "messaging", "assistant"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xenochat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
