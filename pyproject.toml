[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tangy"
version = "0.1.0"
description = "Layout geometry for a picture description language: bounding boxes, directions and anchors, object fitting and lane placement"
requires-python = ">=3.10"
dependencies = []
keywords = ["diagram", "layout", "bounding-box", "vector-graphics", "geometry"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tangy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
