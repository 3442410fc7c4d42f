[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threed"
version = "0.1.0"
description = "A small 3D engine: triangle-mesh scenes, perspective projection, back-face culling and flat directional lighting drawn with pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["3d", "rendering", "engine", "mesh", "projection", "graphics", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = [
    "pytest",
]

[project.scripts]
threed = "threed.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["threed"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
