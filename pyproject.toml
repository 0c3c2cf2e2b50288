[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zenkit"
version = "0.1.0"
description = "PCM audio and bitmap buffers with raw and WAV codecs, colour types, lock-guarded containers and TCP socket helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "wav", "pcm", "image", "bitmap", "color", "socket", "tcp", "poll"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Multimedia :: Graphics",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zenkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
