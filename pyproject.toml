[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wfcgen"
version = "0.1.0"
description = "Overlapping wave function collapse: grow new images from the 3x3 neighbourhoods of a sample image"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "wave function collapse",
    "procedural generation",
    "texture synthesis",
    "image",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
test = [
    "pytest",
]

[project.scripts]
wfcgen = "wfcgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wfcgen"]

[tool.pytest.ini_options]
addopts = "-ra"
