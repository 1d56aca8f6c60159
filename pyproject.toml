[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "haglpy"
version = "0.1.0"
description = "A small pixel graphics library: lines, shapes, FONTX text, bitmaps and clipping on an in-memory frame buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "framebuffer", "fontx", "bitmap", "rgb565", "drawing", "clipping"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["haglpy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
