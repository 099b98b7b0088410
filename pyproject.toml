[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadwalk"
version = "0.1.0"
description = "Gait generation, leg kinematics and state estimation for quadruped robots"
requires-python = ">=3.10"
dependencies = []
keywords = ["quadruped", "robotics", "gait", "kinematics", "odometry", "legged-robot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadwalk"]

[tool.pytest.ini_options]
addopts = "-ra"
