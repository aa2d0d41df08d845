[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fcikit"
version = "0.9.2"
description = "Client-side building blocks for a 7-DoF research robot arm: control types, error flags, logging, filters, load calculations, gripper commands and model access."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["robotics", "robot-arm", "control", "kinematics", "dynamics", "gripper"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fcikit"]

[tool.hatch.build.targets.sdist]
include = ["fcikit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
