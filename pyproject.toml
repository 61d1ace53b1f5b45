[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wamdyn"
version = "0.1.0"
description = "Identified dynamics models, reference trajectories and joint-space controllers for the first four joints of a seven-joint robot arm"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["robotics", "inverse dynamics", "computed torque", "control", "regressor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wamdyn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
