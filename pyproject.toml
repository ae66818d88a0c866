[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledcube"
version = "0.1.0"
description = "Geometry, colour and animation logic for a hexagonal-grid 3D LED cube"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "cube", "neopixel", "animation", "visualization", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ledcube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
