[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ribbleutils"
version = "0.1.2"
description = "Audio signal helpers and recorder, voice-activity and realtime settings for a speech transcription app"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "gain", "dc-block", "pcm", "vad", "transcription", "settings"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ribbleutils"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
