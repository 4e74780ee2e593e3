import math

import pytest

from tapeecho.filters import AllPassFilter, FirFilter, OnePole


def test_one_pole_after_reset_holds_zero():
    pole = OnePole()
    pole.reset(48000.0)
    assert [pole.process(1.0) for _ in range(5)] == [0.0] * 5


def test_one_pole_longer_time_is_slower():
    fast = OnePole()
    slow = OnePole()
    for pole in (fast, slow):
        pole.reset(1000.0)
    fast.set_time_constant(0.01)
    slow.set_time_constant(0.1)
    assert fast.process(1.0) > slow.process(1.0)


def test_one_pole_time_constant_without_rate_raises():
    pole = OnePole()
    with pytest.raises(ValueError):
        pole.set_time_constant(0.5)


def test_one_pole_cutoff_sets_alpha_in_range():
    pole = OnePole()
    pole.set_cutoff(0.05)
    first = pole.process(1.0)
    assert first == pytest.approx(pole.alpha)
    assert 0.0 < first < 1.0


def test_one_pole_reset_clears_alpha():
    pole = OnePole()
    pole.set_cutoff(0.1)
    pole.process(1.0)
    pole.reset(44100.0)
    assert pole.alpha == 0.0
    assert pole.sample_rate == 44100.0
    assert pole.process(1.0) == 0.0


def test_allpass_first_impulse_output():
    ap = AllPassFilter()
    ap.reset(48000.0)
    assert ap.process(1.0) == -0.5


def test_allpass_preserves_energy():
    ap = AllPassFilter()
    ap.reset(48000.0)
    response = [ap.process(1.0)] + [ap.process(0.0) for _ in range(200)]
    assert sum(y * y for y in response) == pytest.approx(1.0, abs=1e-9)


def test_allpass_reset_clears_state():
    ap = AllPassFilter()
    ap.reset(48000.0)
    first = [ap.process(x) for x in (1.0, 0.3, -0.2)]
    ap.reset(48000.0)
    second = [ap.process(x) for x in (1.0, 0.3, -0.2)]
    assert first == second


def test_fir_rejects_zero_taps():
    with pytest.raises(ValueError):
        FirFilter(0)


def test_fir_without_coefficients_outputs_zero():
    fir = FirFilter(8)
    assert [fir.process(1.0) for _ in range(10)] == [0.0] * 10


def test_fir_centre_coefficient():
    fir = FirFilter(100)
    fir.set_cutoff_frequency(12000.0, 48000.0)
    omega = 2.0 * math.pi * 12000.0 / 48000.0
    assert fir.coefficients[50] == pytest.approx(omega / math.pi)


def test_fir_passes_dc():
    fir = FirFilter(100)
    fir.set_cutoff_frequency(12000.0, 48000.0)
    out = [fir.process(1.0) for _ in range(150)]
    assert out[-1] == pytest.approx(sum(fir.coefficients))
    assert out[-1] == pytest.approx(1.0, abs=0.05)


def test_fir_impulse_response_holds_every_coefficient():
    fir = FirFilter(16)
    fir.set_cutoff_frequency(5000.0, 48000.0)
    response = [fir.process(1.0)] + [fir.process(0.0) for _ in range(15)]
    assert sorted(response) == pytest.approx(sorted(fir.coefficients))


def test_fir_is_linear():
    a = FirFilter(12)
    b = FirFilter(12)
    for fir in (a, b):
        fir.set_cutoff_frequency(4000.0, 44100.0)
    signal = [0.2, -0.4, 0.9, 0.0, 0.1, 0.5]
    assert [b.process(2.0 * x) for x in signal] == pytest.approx(
        [2.0 * a.process(x) for x in signal]
    )