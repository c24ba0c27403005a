[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airwatch"
version = "0.1.0"
description = "Urban air-pollution tracking: current levels, weighted predictions, alerts, averages and CSV reports per zone."
requires-python = ">=3.10"
dependencies = []
keywords = ["air quality", "pollution", "CO2", "SO2", "NO2", "PM2.5", "prediction", "alerts"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
airwatch = "airwatch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["airwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
