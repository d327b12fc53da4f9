[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icnskit"
version = "0.1.0"
description = "Building blocks for reading, writing and managing Apple ICNS icon images"
requires-python = ">=3.10"
dependencies = []
keywords = ["icns", "icon", "iconset", "macos", "jpeg2000", "image"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["icnskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
