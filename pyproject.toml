[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcpad"
version = "1.0.0"
description = "A small keypad calculator with a Tk window and a reusable calculation engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arithmetic", "keypad", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
calcpad = "calcpad.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["calcpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
