[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raopkit"
version = "0.1.0"
description = "Building blocks for the receiving side of AirPlay audio: RTP clock mapping, resend requests, server settings and the FairPlay buffer-garbling step"
requires-python = ">=3.10"
dependencies = []
keywords = ["airplay", "raop", "rtp", "audio", "streaming", "fairplay"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["raopkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
