import math

import numpy as np
import pytest

from gradient_texture.conversions import (
    to_linear,
    to_gamma,
    np_to_linear,
    np_to_gamma,
)


def test_known_midpoint_values():
    assert to_linear(0.5) == pytest.approx(0.21404114, abs=1e-7)
    assert to_gamma(0.5) == pytest.approx(0.73535698, abs=1e-7)


def test_endpoints_are_fixed():
    assert to_linear(0.0) == 0.0
    assert to_gamma(0.0) == 0.0
    assert to_linear(1.0) == 1.0
    assert to_gamma(1.0) == 1.0


def test_linear_segment_near_black():
    assert to_linear(0.04) == pytest.approx(0.04 / 12.92)
    assert to_gamma(0.002) == pytest.approx(0.002 * 12.92)


def test_negative_values_clamp_to_zero():
    assert to_linear(-0.3) == 0.0
    assert to_gamma(-0.3) == 0.0


def test_hdr_values_follow_power_curve():
    assert to_linear(2.0) == pytest.approx(math.pow(2.0, 2.2))
    assert to_gamma(4.0) == pytest.approx(math.pow(4.0, 1 / 2.2))


def test_gamma_inverts_linear():
    for v in (0.01, 0.2, 0.5, 0.9):
        assert to_gamma(to_linear(v)) == pytest.approx(v, abs=1e-9)


def test_vectorised_matches_scalar_and_keeps_alpha():
    """The array variants convert RGB per channel and copy alpha untouched."""
    colors = np.array([
        [0.0, 0.02, 0.5, 0.3],
        [0.9, 1.0, 2.5, 1.0],
    ])
    lin = np_to_linear(colors)
    gam = np_to_gamma(colors)
    for row in range(2):
        for ch in range(3):
            assert lin[row, ch] == pytest.approx(to_linear(colors[row, ch]))
            assert gam[row, ch] == pytest.approx(to_gamma(colors[row, ch]))
    assert np.array_equal(lin[:, 3], colors[:, 3])
    assert np.array_equal(gam[:, 3], colors[:, 3])


def test_vectorised_is_monotonic():
    values = np.linspace(0.0, 3.0, 301)
    colors = np.stack([values, values, values, np.ones_like(values)], axis=-1)
    assert np.all(np.diff(np_to_linear(colors)[:, 0]) > 0)
    assert np.all(np.diff(np_to_gamma(colors)[:, 0]) > 0)
