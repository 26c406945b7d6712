[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agencia"
version = "0.1.0"
description = "Travel agency model: tourist products, flights, packages, users, bookings and a traveller menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["travel", "agency", "booking", "tour-package", "flights"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["agencia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
