[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regimage"
version = "0.1.0"
description = "Images in physical space, index grids, Gaussian smoothing, downsampling and multi-resolution pyramids"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["medical imaging", "image registration", "physical space", "gaussian", "downsampling", "pyramid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["regimage"]

[tool.pytest.ini_options]
addopts = "-ra"
