import pytest

from tapeecho.delayline import CircularBuffer


def filled(sample_rate, max_ms, values):
    buf = CircularBuffer(sample_rate, max_ms)
    for v in values:
        buf.write(float(v))
    return buf


def test_length_is_power_of_two_and_covers_delay():
    buf = CircularBuffer(48000, 700.0)
    size = len(buf)
    assert size & (size - 1) == 0
    assert size >= int(0.7 * 48000 + 1)
    assert size == 65536


def test_float_sample_rate_is_truncated():
    buf = CircularBuffer(1000.9, 3.0)
    assert buf.sample_rate == 1000


def test_starts_silent():
    buf = CircularBuffer(1000, 10.0)
    assert buf.read_samples(0) == 0.0
    assert buf.read(5.0, True) == 0.0


def test_read_samples_counts_back_from_before_last_write():
    buf = filled(1000, 100.0, range(10))
    assert [buf.read_samples(k) for k in range(4)] == [8.0, 7.0, 6.0, 5.0]


def test_read_whole_ms_matches_read_samples():
    buf = filled(1000, 100.0, range(20))
    assert buf.read(3.0, False) == buf.read_samples(3)
    assert buf.read(3.0, True) == buf.read_samples(3)


def test_read_truncates_without_interpolation():
    buf = filled(1000, 100.0, range(20))
    assert buf.read(2.9, False) == buf.read_samples(2)


def test_interpolated_read_is_between_neighbours():
    buf = filled(1000, 100.0, range(20))
    mid = (buf.read_samples(2) + buf.read_samples(3)) / 2
    assert buf.read(2.5, True) == pytest.approx(mid)


def test_reads_wrap_around_buffer():
    buf = filled(1000, 3.0, range(10))
    size = len(buf)
    for k in range(size):
        assert buf.read_samples(k + size) == buf.read_samples(k)
    assert buf.read_samples(size - 1) == 9.0


def test_clear_zeroes_contents():
    buf = filled(1000, 50.0, range(1, 30))
    buf.clear()
    assert all(buf.read_samples(k) == 0.0 for k in range(len(buf)))