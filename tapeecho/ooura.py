"""Real-input split-radix FFT kernels (Ooura's rdft and its tables).

``make_tables`` builds the bookkeeping list ``ip`` and the twiddle table
``w`` for one transform length.  ``rdft`` then transforms a list of floats
in place.

For the forward transform (``isgn >= 0``) the result is packed as::

    a[0]       = sum(a[j])
    a[1]       = sum(a[j] * cos(pi * j))
    a[2k]      = sum(a[j] * cos(2 pi j k / n))   0 < k < n/2
    a[2k + 1]  = sum(a[j] * sin(2 pi j k / n))   0 < k < n/2

The inverse (``isgn < 0``) takes that layout back; multiplying the result
by ``2 / n`` recovers the original samples.
"""

from __future__ import annotations

import math


def _is_power_of_two(value):
    return value >= 1 and value & (value - 1) == 0


def make_tables(size):
    """Return ``(ip, w)`` for transforms of length ``size``.

    ``ip`` holds the twiddle and cosine table lengths; ``w`` holds the
    twiddle factors followed by the cosine table.  ``size`` must be a power
    of two no smaller than 2.
    """
    if size < 2 or not _is_power_of_two(size):
        raise ValueError(f"transform size must be a power of two >= 2, got {size}")
    quarter = size // 4
    w = [0.0] * (size // 2)
    nw = _make_twiddles(quarter, w)
    nc = _make_cosines(quarter, w, quarter)
    return [nw, nc], w


def _make_twiddles(nw, w):
    if nw > 2:
        nwh = nw >> 1
        delta = math.atan(1.0) / nwh
        w[0] = 1.0
        w[1] = 0.0
        w[nwh] = math.cos(delta * nwh)
        w[nwh + 1] = w[nwh]
        if nwh > 2:
            for j in range(2, nwh, 2):
                x = math.cos(delta * j)
                y = math.sin(delta * j)
                w[j] = x
                w[j + 1] = y
                w[nw - j] = y
                w[nw - j + 1] = x
            _bit_reverse(nw, w)
    return nw


def _make_cosines(nc, w, offset):
    if nc > 1:
        nch = nc >> 1
        delta = math.atan(1.0) / nch
        w[offset] = math.cos(delta * nch)
        w[offset + nch] = 0.5 * w[offset]
        for j in range(1, nch):
            w[offset + j] = 0.5 * math.cos(delta * j)
            w[offset + nc - j] = 0.5 * math.sin(delta * j)
    return nc


def rdft(n, isgn, a, ip, w):
    """Transform the first ``n`` values of ``a`` in place.

    ``isgn >= 0`` selects the forward transform, ``isgn < 0`` the inverse.
    ``ip`` and ``w`` must come from ``make_tables(n)``.
    """
    if n < 2 or not _is_power_of_two(n):
        raise ValueError(f"transform size must be a power of two >= 2, got {n}")
    if len(a) < n:
        raise ValueError(f"data holds {len(a)} values, transform needs {n}")
    nw, nc = ip[0], ip[1]
    if nw != n // 4 or len(w) < n // 2:
        raise ValueError("tables were made for a different transform size")

    if isgn >= 0:
        if n > 4:
            _bit_reverse(n, a)
            _cft_forward(n, a, w)
            _rft_forward(n, a, nc, w, nw)
        elif n == 4:
            _cft_forward(n, a, w)
        xi = a[0] - a[1]
        a[0] += a[1]
        a[1] = xi
    else:
        a[1] = 0.5 * (a[0] - a[1])
        a[0] -= a[1]
        if n > 4:
            _rft_backward(n, a, nc, w, nw)
            _bit_reverse(n, a)
            _cft_backward(n, a, w)
        elif n == 4:
            _cft_forward(n, a, w)


def _swap_pairs(a, j, k):
    a[j], a[j + 1], a[k], a[k + 1] = a[k], a[k + 1], a[j], a[j + 1]


def _bit_reverse(n, a):
    work = [0] * (n // 4 + 2)
    length = n
    m = 1
    while (m << 3) < length:
        length >>= 1
        for j in range(m):
            work[m + j] = work[j] + length
        m <<= 1
    m2 = 2 * m
    if (m << 3) == length:
        for k in range(m):
            for j in range(k):
                j1 = 2 * j + work[k]
                k1 = 2 * k + work[j]
                _swap_pairs(a, j1, k1)
                j1 += m2
                k1 += 2 * m2
                _swap_pairs(a, j1, k1)
                j1 += m2
                k1 -= m2
                _swap_pairs(a, j1, k1)
                j1 += m2
                k1 += 2 * m2
                _swap_pairs(a, j1, k1)
            j1 = 2 * k + m2 + work[k]
            _swap_pairs(a, j1, j1 + m2)
    else:
        for k in range(1, m):
            for j in range(k):
                j1 = 2 * j + work[k]
                k1 = 2 * k + work[j]
                _swap_pairs(a, j1, k1)
                _swap_pairs(a, j1 + m2, k1 + m2)


def _radix4_inputs(a, j, j1, j2, j3):
    return (
        a[j] + a[j1],
        a[j + 1] + a[j1 + 1],
        a[j] - a[j1],
        a[j + 1] - a[j1 + 1],
        a[j2] + a[j3],
        a[j2 + 1] + a[j3 + 1],
        a[j2] - a[j3],
        a[j2 + 1] - a[j3 + 1],
    )


def _rotate_into(a, dest, wr, wi, xr, xi):
    a[dest] = wr * xr - wi * xi
    a[dest + 1] = wr * xi + wi * xr


def _plain_radix4(a, j, j1, j2, j3):
    x0r, x0i, x1r, x1i, x2r, x2i, x3r, x3i = _radix4_inputs(a, j, j1, j2, j3)
    a[j] = x0r + x2r
    a[j + 1] = x0i + x2i
    a[j2] = x0r - x2r
    a[j2 + 1] = x0i - x2i
    a[j1] = x1r - x3i
    a[j1 + 1] = x1i + x3r
    a[j3] = x1r + x3i
    a[j3 + 1] = x1i - x3r


def _eighth_turn_radix4(a, j, j1, j2, j3, wk1r):
    x0r, x0i, x1r, x1i, x2r, x2i, x3r, x3i = _radix4_inputs(a, j, j1, j2, j3)
    a[j] = x0r + x2r
    a[j + 1] = x0i + x2i
    a[j2] = x2i - x0i
    a[j2 + 1] = x0r - x2r
    x0r = x1r - x3i
    x0i = x1i + x3r
    a[j1] = wk1r * (x0r - x0i)
    a[j1 + 1] = wk1r * (x0r + x0i)
    x0r = x3i + x1r
    x0i = x3r - x1i
    a[j3] = wk1r * (x0i - x0r)
    a[j3 + 1] = wk1r * (x0i + x0r)


def _twiddled_radix4(a, j, j1, j2, j3, wk2, wk1, wk3):
    x0r, x0i, x1r, x1i, x2r, x2i, x3r, x3i = _radix4_inputs(a, j, j1, j2, j3)
    a[j] = x0r + x2r
    a[j + 1] = x0i + x2i
    _rotate_into(a, j2, wk2[0], wk2[1], x0r - x2r, x0i - x2i)
    _rotate_into(a, j1, wk1[0], wk1[1], x1r - x3i, x1i + x3r)
    _rotate_into(a, j3, wk3[0], wk3[1], x1r + x3i, x1i - x3r)


def _cft_stages(n, a, w):
    l = 2
    if n > 8:
        _cft_first(n, a, w)
        l = 8
        while (l << 2) < n:
            _cft_middle(n, l, a, w)
            l <<= 2
    return l


def _cft_forward(n, a, w):
    l = _cft_stages(n, a, w)
    if (l << 2) == n:
        for j in range(0, l, 2):
            _plain_radix4(a, j, j + l, j + 2 * l, j + 3 * l)
    else:
        for j in range(0, l, 2):
            j1 = j + l
            x0r = a[j] - a[j1]
            x0i = a[j + 1] - a[j1 + 1]
            a[j] += a[j1]
            a[j + 1] += a[j1 + 1]
            a[j1] = x0r
            a[j1 + 1] = x0i


def _cft_backward(n, a, w):
    l = _cft_stages(n, a, w)
    if (l << 2) == n:
        for j in range(0, l, 2):
            j1 = j + l
            j2 = j1 + l
            j3 = j2 + l
            x0r, x0i, x1r, x1i, x2r, x2i, x3r, x3i = _radix4_inputs(a, j, j1, j2, j3)
            x0i = -x0i
            x1i = -x1i
            a[j] = x0r + x2r
            a[j + 1] = x0i - x2i
            a[j2] = x0r - x2r
            a[j2 + 1] = x0i + x2i
            a[j1] = x1r - x3i
            a[j1 + 1] = x1i - x3r
            a[j3] = x1r + x3i
            a[j3 + 1] = x1i + x3r
    else:
        for j in range(0, l, 2):
            j1 = j + l
            x0r = a[j] - a[j1]
            x0i = -a[j + 1] + a[j1 + 1]
            a[j] += a[j1]
            a[j + 1] = -a[j + 1] - a[j1 + 1]
            a[j1] = x0r
            a[j1 + 1] = x0i


def _odd_twiddles(wk2r, wk2i, wk1r, wk1i):
    return (wk1r, wk1i), (wk1r - 2 * wk2i * wk1i, 2 * wk2i * wk1r - wk1i)


def _even_twiddles(wk2r, wk1r, wk1i):
    return (wk1r, wk1i), (wk1r - 2 * wk2r * wk1i, 2 * wk2r * wk1r - wk1i)


def _cft_first(n, a, w):
    _plain_radix4(a, 0, 2, 4, 6)
    _eighth_turn_radix4(a, 8, 10, 12, 14, w[2])
    k1 = 0
    for j in range(16, n, 16):
        k1 += 2
        k2 = 2 * k1
        wk2r, wk2i = w[k1], w[k1 + 1]
        wk1, wk3 = _odd_twiddles(wk2r, wk2i, w[k2], w[k2 + 1])
        _twiddled_radix4(a, j, j + 2, j + 4, j + 6, (wk2r, wk2i), wk1, wk3)
        wk1, wk3 = _even_twiddles(wk2r, w[k2 + 2], w[k2 + 3])
        _twiddled_radix4(a, j + 8, j + 10, j + 12, j + 14, (-wk2i, wk2r), wk1, wk3)


def _cft_middle(n, l, a, w):
    m = l << 2
    for j in range(0, l, 2):
        _plain_radix4(a, j, j + l, j + 2 * l, j + 3 * l)
    wk1r = w[2]
    for j in range(m, l + m, 2):
        _eighth_turn_radix4(a, j, j + l, j + 2 * l, j + 3 * l, wk1r)
    k1 = 0
    m2 = 2 * m
    for k in range(m2, n, m2):
        k1 += 2
        k2 = 2 * k1
        wk2r, wk2i = w[k1], w[k1 + 1]
        wk1, wk3 = _odd_twiddles(wk2r, wk2i, w[k2], w[k2 + 1])
        for j in range(k, l + k, 2):
            _twiddled_radix4(a, j, j + l, j + 2 * l, j + 3 * l, (wk2r, wk2i), wk1, wk3)
        wk1, wk3 = _even_twiddles(wk2r, w[k2 + 2], w[k2 + 3])
        for j in range(k + m, l + k + m, 2):
            _twiddled_radix4(a, j, j + l, j + 2 * l, j + 3 * l, (-wk2i, wk2r), wk1, wk3)


def _rft_forward(n, a, nc, w, offset):
    m = n >> 1
    ks = 2 * nc // m
    kk = 0
    for j in range(2, m, 2):
        k = n - j
        kk += ks
        wkr = 0.5 - w[offset + nc - kk]
        wki = w[offset + kk]
        xr = a[j] - a[k]
        xi = a[j + 1] + a[k + 1]
        yr = wkr * xr - wki * xi
        yi = wkr * xi + wki * xr
        a[j] -= yr
        a[j + 1] -= yi
        a[k] += yr
        a[k + 1] -= yi


def _rft_backward(n, a, nc, w, offset):
    a[1] = -a[1]
    m = n >> 1
    ks = 2 * nc // m
    kk = 0
    for j in range(2, m, 2):
        k = n - j
        kk += ks
        wkr = 0.5 - w[offset + nc - kk]
        wki = w[offset + kk]
        xr = a[j] - a[k]
        xi = a[j + 1] + a[k + 1]
        yr = wkr * xr + wki * xi
        yi = wkr * xi - wki * xr
        a[j] -= yr
        a[j + 1] = yi - a[j + 1]
        a[k] += yr
        a[k + 1] = yi - a[k + 1]
    a[m + 1] = -a[m + 1]