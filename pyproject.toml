[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crankbox"
version = "0.1.0"
description = "Melody data, MIDI note output with fade-out, and a touch screen model for a hand-cranked music box"
requires-python = ">=3.10"
keywords = ["midi", "music box", "melody", "crank", "mido"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]
dependencies = [
    "mido",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["crankbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
