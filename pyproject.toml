[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tapeecho"
version = "0.1.0"
description = "Tape echo building blocks: biquads, delay lines, FFT convolution and effect parameters"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "tape echo", "delay", "convolution", "fft", "biquad"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tapeecho"]

[tool.pytest.ini_options]
addopts = "-ra"
