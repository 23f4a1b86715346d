[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stterm"
version = "0.8.4"
description = "Terminal emulator building blocks: screen grid with scrollback, box drawing geometry, keyboard selection, URL finding, X resources and key tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "emulator", "scrollback", "boxdraw", "keyboard", "xresources"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
