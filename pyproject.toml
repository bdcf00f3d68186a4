[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tofkit"
version = "0.1.0"
description = "Status codes, error-code lookups, frame metadata and parameter-file helpers for time-of-flight depth cameras"
requires-python = ">=3.10"
dependencies = []
keywords = ["time-of-flight", "tof", "depth camera", "adsd3500", "metadata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Capture :: Digital Camera",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tofkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
