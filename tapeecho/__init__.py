"""Tape echo building blocks: filters, delay lines, FFT convolution and effect parameters."""

__version__ = "0.1.0"