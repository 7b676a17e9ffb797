[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unitconv"
version = "1.0.0"
description = "Interactive terminal converter for temperature, distance and weight units"
requires-python = ">=3.10"
dependencies = []
keywords = ["units", "conversion", "temperature", "distance", "weight", "cli"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unitconv = "unitconv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["unitconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
