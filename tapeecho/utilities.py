"""Helpers shared by the partitioned FFT convolvers."""

from __future__ import annotations

IR_SILENCE_THRESHOLD = 0.000001


def next_power_of_2(value):
    """Return the smallest power of two that is not below ``value`` (at least 1)."""
    power = 1
    while power < value:
        power *= 2
    return power


def trim_impulse_response(ir):
    """Return ``ir`` as a list without its trailing near-silent samples."""
    samples = [float(x) for x in ir]
    end = len(samples)
    while end > 0 and abs(samples[end - 1]) < IR_SILENCE_THRESHOLD:
        end -= 1
    return samples[:end]


def copy_and_pad(src, size):
    """Return ``src`` as a list of ``size`` floats, zero padded at the end."""
    samples = [float(x) for x in src]
    if len(samples) > size:
        raise ValueError(
            f"source holds {len(samples)} samples, more than the target size {size}"
        )
    samples.extend([0.0] * (size - len(samples)))
    return samples


def complex_multiply_accumulate(result, a, b):
    """Return ``result[i] + a[i] * b[i]`` for spectra of complex bins."""
    if not len(result) == len(a) == len(b):
        raise ValueError(
            f"spectra differ in length: {len(result)}, {len(a)}, {len(b)}"
        )
    return [r + x * y for r, x, y in zip(result, a, b)]