"""Small building-block filters: one-pole smoother, first-order all-pass, FIR."""

from __future__ import annotations

import math


class OnePole:
    """One-pole low-pass used for parameter and envelope smoothing."""

    def __init__(self):
        self.alpha = 0.0
        self.sample_rate = 0.0
        self._z1 = 0.0

    def set_cutoff(self, fc):
        """Set the coefficient from a normalised cutoff frequency."""
        self.alpha = 1.0 - math.exp(-2.0 * math.pi * fc)

    def set_time_constant(self, seconds):
        """Set the coefficient from a smoothing time in seconds."""
        span = seconds * self.sample_rate
        if span == 0:
            raise ValueError("time constant and sample rate must be non-zero")
        self.alpha = 1.0 - math.exp(-1.0 / span)

    def reset(self, sample_rate):
        """Clear state and coefficient and set the sample rate."""
        self._z1 = 0.0
        self.alpha = 0.0
        self.sample_rate = float(sample_rate)

    def process(self, xn):
        """Smooth one sample."""
        yn = self._z1 + self.alpha * (xn - self._z1)
        self._z1 = yn
        return yn


class AllPassFilter:
    """First-order all-pass section with a fixed coefficient of 0.5."""

    def __init__(self):
        self.alpha = 0.5
        self.sample_rate = 0.0
        self._x1 = 0.0
        self._y1 = 0.0

    def reset(self, sample_rate):
        """Clear the state and set the sample rate."""
        self.sample_rate = float(sample_rate)
        self._x1 = self._y1 = 0.0

    def process(self, xn):
        """Filter one sample."""
        yn = self._x1 + self.alpha * (self._y1 - xn)
        self._x1 = xn
        self._y1 = yn
        return yn


class FirFilter:
    """Windowless sinc low-pass FIR filter with a circular delay line."""

    def __init__(self, num_taps):
        if num_taps < 1:
            raise ValueError("an FIR filter needs at least one tap")
        self.num_taps = num_taps
        self.coefficients = [0.0] * num_taps
        self._delay = [0.0] * num_taps
        self._current = 0

    def set_cutoff_frequency(self, cutoff, sample_rate):
        """Compute sinc coefficients for the given cutoff."""
        omega = 2.0 * math.pi * cutoff / sample_rate
        centre = self.num_taps // 2
        half = self.num_taps / 2.0
        self.coefficients = [
            omega / math.pi
            if i == centre
            else math.sin(omega * (i - half)) / (math.pi * (i - half))
            for i in range(self.num_taps)
        ]

    def process(self, x):
        """Push one sample into the delay line and return the filtered output."""
        n = self.num_taps
        self._delay[self._current] = x
        start = self._current
        ordered = self._delay[start:] + self._delay[:start]
        output = sum(c * d for c, d in zip(self.coefficients, ordered))
        self._current = (self._current + 1) % n
        return output