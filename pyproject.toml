[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelboard"
version = "0.1.0"
description = "A small windowed drawing surface with a colour palette, a demo board and a movable cursor box"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["graphics", "drawing", "palette", "pygame", "demo"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelboard = "pixelboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
