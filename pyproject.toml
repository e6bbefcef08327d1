[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geantcad"
version = "0.2.0"
description = "Toolkit-independent parts of a Geant4 geometry editor: themes, measurements, shortcuts, preferences and a material catalogue"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["geant4", "cad", "detector", "geometry", "physics", "measurement", "theme"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["geantcad"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
