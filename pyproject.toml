[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dronetelemetry"
version = "1.0.0"
description = "Simulated real-time drone telemetry with movement strategies, failure simulation and a text dashboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["drone", "telemetry", "simulation", "uav", "gps", "battery"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dronetelemetry = "dronetelemetry.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dronetelemetry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
