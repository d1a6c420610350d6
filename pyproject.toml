[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psxfunk"
version = "0.1.0"
description = "Rhythm-game engine building blocks and console format helpers: animation scripts, archives, integer trigonometry, object lists, bold font layout, MIPS encoding and GPU command words"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "animation", "archive", "mips", "gpu", "fixed-point", "rhythm-game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["psxfunk"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
