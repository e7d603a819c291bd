[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repartovan"
version = "0.1.0"
description = "Simulates sorting random parcels into delivery zones, loading them into vans and dispatching them."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "delivery", "parcels", "stack", "queue", "logistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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

[project.scripts]
repartovan = "repartovan.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["repartovan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
