[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trashsim"
version = "0.1.0"
description = "A multi-threaded console simulation of garbage producers, smart trash cans with load sensors, and garbage collectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "threading", "trash can", "load sensor", "game"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trashsim = "trashsim.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["trashsim"]

[tool.pytest.ini_options]
addopts = "-ra"
