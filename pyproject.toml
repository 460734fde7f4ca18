[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sculk"
version = "0.1.0"
description = "Read binary NBT and parse Minecraft block entity compounds into typed Python objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "nbt", "block-entity", "parser"]
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
    "Topic :: File Formats",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sculk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
