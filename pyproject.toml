[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seafarer"
version = "0.1.0"
description = "A small tile-based sailing game with wind physics and procedurally generated islands"
requires-python = ">=3.10"
keywords = ["game", "sailing", "simulation", "procedural-generation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
seafarer = "seafarer.game:main"

[tool.hatch.build.targets.wheel]
packages = ["seafarer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
