"""Uniformly partitioned FFT convolution without added latency."""

from __future__ import annotations

import math

from .audiofft import AudioFFT, complex_size
from .utilities import (
    complex_multiply_accumulate,
    copy_and_pad,
    next_power_of_2,
    trim_impulse_response,
)


class FFTConvolver:
    """Convolves a stream with an impulse response split into equal blocks.

    After :meth:`init`, input of any length can be passed to :meth:`process`;
    each call returns the same number of convolved samples straight away.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Discard the impulse response and all state."""
        self.block_size = 0
        self._segment_size = 0
        self._segment_count = 0
        self._bins = 0
        self._fft = None
        self._segments = []
        self._ir_segments = []
        self._pre_multiplied = []
        self._overlap = []
        self._current = 0
        self._input = []
        self._input_fill = 0

    @property
    def segment_count(self):
        """Number of impulse response partitions in use."""
        return self._segment_count

    def init(self, block_size, ir):
        """Prepare to convolve with ``ir`` using partitions of ``block_size``.

        The block size is rounded up to a power of two.  Trailing silence in
        the impulse response is ignored; an all-silent response gives silence.
        """
        self.reset()
        if block_size <= 0:
            raise ValueError("block size must be greater than 0")

        samples = trim_impulse_response(ir)
        if not samples:
            return

        self.block_size = next_power_of_2(block_size)
        self._segment_size = 2 * self.block_size
        self._segment_count = math.ceil(len(samples) / self.block_size)
        self._bins = complex_size(self._segment_size)
        self._fft = AudioFFT(self._segment_size)

        zero_spectrum = [0j] * self._bins
        self._segments = [list(zero_spectrum) for _ in range(self._segment_count)]
        self._ir_segments = [
            self._spectrum(samples[start:start + self.block_size])
            for start in range(0, len(samples), self.block_size)
        ]
        self._pre_multiplied = list(zero_spectrum)
        self._overlap = [0.0] * self.block_size
        self._input = [0.0] * self.block_size
        self._input_fill = 0
        self._current = 0

    def _spectrum(self, block):
        re, im = self._fft.fft(copy_and_pad(block, self._segment_size))
        return [complex(r, i) for r, i in zip(re, im)]

    def process(self, samples):
        """Convolve ``samples`` and return as many output samples."""
        samples = [float(x) for x in samples]
        total = len(samples)
        if self._segment_count == 0:
            return [0.0] * total

        output = []
        processed = 0
        while processed < total:
            input_was_empty = self._input_fill == 0
            processing = min(total - processed, self.block_size - self._input_fill)
            position = self._input_fill
            self._input[position:position + processing] = samples[
                processed:processed + processing
            ]

            self._segments[self._current] = self._spectrum(self._input)

            if input_was_empty:
                accumulated = [0j] * self._bins
                for offset in range(1, self._segment_count):
                    audio_index = (self._current + offset) % self._segment_count
                    accumulated = complex_multiply_accumulate(
                        accumulated,
                        self._ir_segments[offset],
                        self._segments[audio_index],
                    )
                self._pre_multiplied = accumulated

            conv = complex_multiply_accumulate(
                self._pre_multiplied,
                self._segments[self._current],
                self._ir_segments[0],
            )
            time_domain = self._fft.ifft(
                [c.real for c in conv], [c.imag for c in conv]
            )

            output.extend(
                a + b
                for a, b in zip(
                    time_domain[position:position + processing],
                    self._overlap[position:position + processing],
                )
            )

            self._input_fill += processing
            if self._input_fill == self.block_size:
                self._input = [0.0] * self.block_size
                self._input_fill = 0
                self._overlap = time_domain[self.block_size:]
                self._current = (
                    self._current - 1 if self._current > 0 else self._segment_count - 1
                )

            processed += processing
        return output