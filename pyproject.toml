[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "widgetkit"
version = "0.1.0"
description = "A small backend-agnostic widget toolkit: geometry, colours, input events, buttons, labels and box layouts."
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "widgets", "layout", "events", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["widgetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
