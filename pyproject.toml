[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swapper-anim"
version = "0.1.0"
description = "Bone rotation animation model, input state tracking, frame timing and scene management for a 2D game editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "animation", "bone", "scene", "input", "fps"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["swapper_anim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
