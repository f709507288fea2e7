[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aether-progress"
version = "1.0.0"
description = "Progress bars, spinners, ETA and throughput calculation for long-running operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["progress", "progress-bar", "spinner", "eta", "throughput", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aether_progress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
