[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stackadt"
version = "1.0.0"
description = "A last-in, first-out stack, line-based input helpers and a demo program"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "lifo", "adt", "data-structure", "input"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stackadt-demo = "stackadt.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["stackadt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
