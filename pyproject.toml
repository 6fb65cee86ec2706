[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ndlayout"
version = "0.1.0"
description = "Multidimensional extents with static and dynamic sizes, and strided index layout mappings"
requires-python = ">=3.10"
dependencies = []
keywords = ["extents", "layout", "strides", "multidimensional", "indexing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ndlayout"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
