[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubesculpt"
version = "0.1.0"
description = "A small polygon model editor core: sculpt a cube by dragging vertices in orthographic views."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "modeling", "mesh", "polygon", "triangulation", "editor"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubesculpt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
