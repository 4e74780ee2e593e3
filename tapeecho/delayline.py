"""Power-of-two circular delay line with optional fractional reads."""

from __future__ import annotations


class CircularBuffer:
    """Delay line sized for a maximum delay time, read in ms or samples."""

    def __init__(self, sample_rate, max_delay_ms):
        self.sample_rate = int(sample_rate)
        self.max_delay_ms = float(max_delay_ms)
        needed = int((self.max_delay_ms / 1000.0) * self.sample_rate + 1)
        length = 1 << max(needed - 1, 0).bit_length()
        self._buffer = [0.0] * length
        self._write_index = 0

    def __len__(self):
        return len(self._buffer)

    def clear(self):
        """Zero every stored sample."""
        self._buffer = [0.0] * len(self._buffer)

    def write(self, xn):
        """Advance the write position and store a sample there."""
        self._write_index = (self._write_index + 1) % len(self._buffer)
        self._buffer[self._write_index] = xn

    def read(self, delay_ms, interpolate):
        """Read a sample ``delay_ms`` milliseconds back, optionally interpolated."""
        exact = (delay_ms / 1000.0) * self.sample_rate
        whole = int(exact)
        size = len(self._buffer)
        index = (self._write_index - 1 - whole) % size
        yn = self._buffer[index]
        if interpolate:
            older = self._buffer[(index - 1) % size]
            frac = exact - whole
            yn = yn * (1.0 - frac) + older * frac
        return yn

    def read_samples(self, delay):
        """Read a sample a whole number of samples back."""
        return self._buffer[(self._write_index - 1 - delay) % len(self._buffer)]