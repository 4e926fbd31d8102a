[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "festlib"
version = "0.3.0"
description = "Read entries from the Norwegian FEST drug catalogue XML file"
requires-python = ">=3.10"
dependencies = []
keywords = ["fest", "xml", "drug catalogue", "pharmacy", "prescription"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Natural Language :: Norwegian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["festlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
