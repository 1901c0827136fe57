[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qubitcalc"
version = "0.2.0"
description = "Notepad-style calculator with variables, user functions and unit conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "units", "conversion", "expressions", "math"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qubitcalc = "qubitcalc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["qubitcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
