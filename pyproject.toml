[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orangevox"
version = "0.1.0"
description = "Voxel world logic: blocks, chunks, chunk streaming, collision, cameras, frustum culling, day/night lighting and editor panel layout"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["voxel", "chunks", "game", "frustum-culling", "day-night-cycle", "camera"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["orangevox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
