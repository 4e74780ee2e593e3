"""Second-order IIR filters and cascades of them."""

from __future__ import annotations

import math
from enum import IntEnum


class BiquadType(IntEnum):
    """Response shapes a :class:`Biquad` can take."""

    LPF = 0
    HPF = 1
    NOTCH = 2
    PEAKING = 3
    LOW_SHELF = 4
    HIGH_SHELF = 5


class Biquad:
    """Direct form I biquad filter with cookbook coefficients.

    Gain only affects the peaking and shelving types; pass ``0.0`` otherwise.
    """

    def __init__(self, filter_type, cutoff, sample_rate, q, gain_db):
        self.filter_type = BiquadType(filter_type)
        self.cutoff = float(cutoff)
        self.sample_rate = float(sample_rate)
        self.q = float(q)
        self.gain_db = float(gain_db)
        self._x1 = self._x2 = self._y1 = self._y2 = 0.0
        self._calculate()

    def set_parameters(self, cutoff, q, gain_db):
        """Change cutoff, Q and gain; coefficients are recomputed only on change."""
        if cutoff != self.cutoff or q != self.q or gain_db != self.gain_db:
            self.cutoff = float(cutoff)
            self.q = float(q)
            self.gain_db = float(gain_db)
            self._calculate()

    def set_cutoff(self, cutoff):
        """Change only the cutoff frequency."""
        if cutoff != self.cutoff:
            self.cutoff = float(cutoff)
            self._calculate()

    def set_gain(self, gain_db):
        """Change only the gain in decibels."""
        if gain_db != self.gain_db:
            self.gain_db = float(gain_db)
            self._calculate()

    def reset(self, sample_rate):
        """Clear the filter state and adopt a new sample rate if it differs."""
        self._x1 = self._x2 = self._y1 = self._y2 = 0.0
        if sample_rate != self.sample_rate:
            self.sample_rate = float(sample_rate)
            self._calculate()

    def process(self, xn):
        """Filter one sample and return the output."""
        yn = (
            self._b0 * xn
            + self._b1 * self._x1
            + self._b2 * self._x2
            - self._a1 * self._y1
            - self._a2 * self._y2
        )
        self._x2, self._x1 = self._x1, xn
        self._y2, self._y1 = self._y1, yn
        return yn

    def _calculate(self):
        w = 2.0 * math.pi * (self.cutoff / self.sample_rate)
        cosw = math.cos(w)
        sinw = math.sin(w)
        alpha = sinw / (2.0 * self.q)
        amp = 10.0 ** (self.gain_db / 40.0)
        shelf = 2.0 * math.sqrt(amp) * alpha

        kind = self.filter_type
        if kind is BiquadType.LPF:
            b0 = (1.0 - cosw) / 2.0
            b1 = 1.0 - cosw
            b2 = (1.0 - cosw) / 2.0
            a0, a1, a2 = 1.0 + alpha, -2.0 * cosw, 1.0 - alpha
        elif kind is BiquadType.HPF:
            b0 = (1.0 + cosw) / 2.0
            b1 = -(1.0 + cosw)
            b2 = (1.0 + cosw) / 2.0
            a0, a1, a2 = 1.0 + alpha, -2.0 * cosw, 1.0 - alpha
        elif kind is BiquadType.NOTCH:
            b0, b1, b2 = 1.0, -2.0 * cosw, 1.0
            a0, a1, a2 = 1.0 + alpha, -2.0 * cosw, 1.0 - alpha
        elif kind is BiquadType.PEAKING:
            b0 = 1.0 + alpha * amp
            b1 = -2.0 * cosw
            b2 = 1.0 - alpha * amp
            a0 = 1.0 + alpha / amp
            a1 = -2.0 * cosw
            a2 = 1.0 - alpha / amp
        elif kind is BiquadType.LOW_SHELF:
            b0 = amp * ((amp + 1.0) - (amp - 1.0) * cosw + shelf)
            b1 = 2.0 * amp * ((amp - 1.0) - (amp + 1.0) * cosw)
            b2 = amp * ((amp + 1.0) - (amp - 1.0) * cosw - shelf)
            a0 = (amp + 1.0) + (amp - 1.0) * cosw + shelf
            a1 = -2.0 * ((amp - 1.0) + (amp + 1.0) * cosw)
            a2 = (amp + 1.0) + (amp - 1.0) * cosw - shelf
        else:
            b0 = amp * ((amp + 1.0) + (amp - 1.0) * cosw + shelf)
            b1 = -2.0 * amp * ((amp - 1.0) + (amp + 1.0) * cosw)
            b2 = amp * ((amp + 1.0) + (amp - 1.0) * cosw - shelf)
            a0 = (amp + 1.0) - (amp - 1.0) * cosw + shelf
            a1 = 2.0 * ((amp - 1.0) - (amp + 1.0) * cosw)
            a2 = (amp + 1.0) - (amp - 1.0) * cosw - shelf

        self._b0 = b0 / a0
        self._b1 = b1 / a0
        self._b2 = b2 / a0
        self._a1 = a1 / a0
        self._a2 = a2 / a0


class BiquadCascade:
    """A chain of identical Butterworth-Q low-pass biquads."""

    Q = 0.707

    def __init__(self, num_filters):
        if num_filters <= 0:
            raise ValueError("Number of filters must be greater than 0.")
        self.num_filters = num_filters
        self._filters: list[Biquad] = []

    def init_filters(self, sample_rate, cutoff):
        """Configure every stage as a low-pass at ``cutoff`` and clear its state."""
        self._filters = []
        for _ in range(self.num_filters):
            stage = Biquad(BiquadType.LPF, cutoff, sample_rate, self.Q, 0.0)
            stage.reset(sample_rate)
            self._filters.append(stage)

    def process(self, x):
        """Run one sample through every stage in turn."""
        if not self._filters:
            raise RuntimeError("init_filters must be called before processing")
        for stage in self._filters:
            x = stage.process(x)
        return x