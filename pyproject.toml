[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "predefinfo"
version = "1.15.1"
description = "Identify compilers, architectures, operating systems, libraries and platforms from predefined preprocessor macros."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "preprocessor",
    "predefined macros",
    "compiler detection",
    "architecture",
    "version numbers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["predefinfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
