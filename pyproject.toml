[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voicefeat"
version = "0.1.0"
description = "Cepstral speech features (MFCC and related) from WAV files and sample buffers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "mfcc",
    "cepstral",
    "speech",
    "audio",
    "features",
    "filterbank",
    "mel",
    "delta",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voicefeat = "voicefeat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["voicefeat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
