[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadgui"
version = "0.1.0"
description = "Immediate-mode GUI building blocks: layout cursor, input state, styles, draw commands, mesh batching and text editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "immediate-mode", "layout", "text-editor", "mesh", "draw-commands"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
