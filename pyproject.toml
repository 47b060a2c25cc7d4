[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multivox"
version = "0.1.0"
description = "Slice mapping, rotation tracking, voxel rasterisation and scan-out helpers for swept-panel voxel displays"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "voxel",
    "volumetric-display",
    "swept-volume",
    "led-matrix",
    "hub75",
    "rasterisation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
packages = ["multivox"]

[tool.hatch.build.targets.sdist]
include = ["multivox", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
