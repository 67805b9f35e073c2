[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathtracer"
version = "0.1.0"
description = "Building blocks for a Monte Carlo path tracer: vectors, rays, bounding boxes, diffuse materials, lights and a Wavefront OBJ loader"
requires-python = ">=3.10"
dependencies = []
keywords = ["path tracing", "ray tracing", "bounding box", "rendering", "wavefront obj", "mtl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pathtracer"]

[tool.hatch.build.targets.sdist]
include = ["pathtracer", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
