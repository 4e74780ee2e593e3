import math
import random

import pytest

from tapeecho.audiofft import AudioFFT, complex_size


SIZES = [2, 4, 8, 16, 32, 64, 256, 1024]


def _signal(n, seed):
    rng = random.Random(seed)
    return [rng.uniform(-1.0, 1.0) for _ in range(n)]


def test_complex_size_matches_documented_layout():
    assert complex_size(1024) == 513
    assert complex_size(2) == 2


@pytest.mark.parametrize("size", SIZES)
def test_output_lengths(size):
    re, im = AudioFFT(size).fft(_signal(size, 1))
    assert len(re) == complex_size(size)
    assert len(im) == complex_size(size)


@pytest.mark.parametrize("size", SIZES)
def test_round_trip(size):
    fft = AudioFFT(size)
    data = _signal(size, size)
    restored = fft.ifft(*fft.fft(data))
    assert restored == pytest.approx(data, abs=1e-9)


@pytest.mark.parametrize("size", SIZES)
def test_dc_and_nyquist_imaginary_parts_are_zero(size):
    _, im = AudioFFT(size).fft(_signal(size, 7))
    assert im[0] == 0.0
    assert im[-1] == 0.0


@pytest.mark.parametrize("size", [4, 16, 128])
def test_unit_impulse_has_flat_spectrum(size):
    data = [0.0] * size
    data[0] = 1.0
    re, im = AudioFFT(size).fft(data)
    assert re == pytest.approx([1.0] * complex_size(size), abs=1e-12)
    assert im == pytest.approx([0.0] * complex_size(size), abs=1e-12)


@pytest.mark.parametrize("size", [8, 64])
def test_constant_signal_only_has_dc(size):
    data = [0.25] * size
    re, im = AudioFFT(size).fft(data)
    assert re[0] == pytest.approx(sum(data))
    assert re[1:] == pytest.approx([0.0] * (len(re) - 1), abs=1e-12)
    assert im == pytest.approx([0.0] * len(im), abs=1e-12)


@pytest.mark.parametrize("size", [8, 32, 512])
def test_delayed_impulse_is_a_rotating_phasor(size):
    data = [0.0] * size
    data[1] = 1.0
    re, im = AudioFFT(size).fft(data)
    for k in range(complex_size(size)):
        angle = 2.0 * math.pi * k / size
        assert re[k] == pytest.approx(math.cos(angle), abs=1e-12)
        assert im[k] == pytest.approx(-math.sin(angle), abs=1e-12)


def test_nyquist_bin_of_alternating_signal():
    size = 16
    data = [1.0 if j % 2 == 0 else -1.0 for j in range(size)]
    re, im = AudioFFT(size).fft(data)
    assert re[-1] == pytest.approx(size)
    assert re[:-1] == pytest.approx([0.0] * (len(re) - 1), abs=1e-12)


def test_transform_is_linear():
    size = 64
    fft = AudioFFT(size)
    x = _signal(size, 3)
    y = _signal(size, 4)
    re_x, im_x = fft.fft(x)
    re_y, im_y = fft.fft(y)
    re_s, im_s = fft.fft([a + 2.0 * b for a, b in zip(x, y)])
    assert re_s == pytest.approx([a + 2.0 * b for a, b in zip(re_x, re_y)], abs=1e-9)
    assert im_s == pytest.approx([a + 2.0 * b for a, b in zip(im_x, im_y)], abs=1e-9)


def test_parseval_energy():
    size = 128
    data = _signal(size, 11)
    re, im = AudioFFT(size).fft(data)
    spectrum_energy = re[0] ** 2 + re[-1] ** 2 + 2.0 * sum(
        r * r + i * i for r, i in zip(re[1:-1], im[1:-1])
    )
    assert spectrum_energy / size == pytest.approx(sum(x * x for x in data))


def test_fft_does_not_modify_input():
    data = _signal(32, 5)
    copy = list(data)
    AudioFFT(32).fft(data)
    assert data == copy


@pytest.mark.parametrize("size", [0, 1, 3, 12, 100])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        AudioFFT(size)


def test_wrong_input_length_rejected():
    with pytest.raises(ValueError):
        AudioFFT(16).fft([0.0] * 15)


def test_wrong_spectrum_length_rejected():
    fft = AudioFFT(16)
    with pytest.raises(ValueError):
        fft.ifft([0.0] * 8, [0.0] * 9)