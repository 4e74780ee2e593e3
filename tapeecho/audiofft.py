"""Real-to-complex FFT with split-complex output."""

from __future__ import annotations

from .ooura import make_tables, rdft


def complex_size(size):
    """Return the length of the real and imaginary arrays for ``size`` samples."""
    return size // 2 + 1


class AudioFFT:
    """Forward and inverse FFT of power-of-two length real signals.

    The spectrum is returned as two lists, real and imaginary parts, each
    holding ``complex_size(size)`` bins from DC up to Nyquist.  The inverse
    transform is scaled so that ``ifft(*fft(x))`` gives back ``x``.
    """

    def __init__(self, size):
        if size < 2 or size & (size - 1):
            raise ValueError(f"FFT size must be a power of two >= 2, got {size}")
        self.size = size
        self._ip, self._w = make_tables(size)

    @property
    def complex_size(self):
        """Number of bins in each half of the split-complex spectrum."""
        return complex_size(self.size)

    def fft(self, data):
        """Transform ``size`` real samples; return ``(re, im)``."""
        buffer = [float(x) for x in data]
        if len(buffer) != self.size:
            raise ValueError(
                f"expected {self.size} samples, got {len(buffer)}"
            )
        rdft(self.size, 1, buffer, self._ip, self._w)

        re = buffer[0::2]
        im = [-x for x in buffer[1::2]]
        re.append(-im[0])
        im[0] = 0.0
        im.append(0.0)
        return re, im

    def ifft(self, re, im):
        """Transform a split-complex spectrum back into ``size`` real samples."""
        bins = self.complex_size
        if len(re) != bins or len(im) != bins:
            raise ValueError(
                f"expected {bins} bins in each part, got {len(re)} and {len(im)}"
            )
        half = self.size // 2
        buffer = [0.0] * self.size
        buffer[0::2] = [float(x) for x in re[:half]]
        buffer[1::2] = [-float(x) for x in im[:half]]
        buffer[1] = float(re[half])

        rdft(self.size, -1, buffer, self._ip, self._w)

        scale = 2.0 / self.size
        return [x * scale for x in buffer]