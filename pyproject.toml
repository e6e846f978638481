[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "micaview"
version = "0.1.0"
description = "Image viewer core: zoom and pan state, Mica dark theme, NTP-synchronised clock, command-line parsing and result reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["image-viewer", "zoom", "theme", "ntp", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["micaview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
