import math

import numpy as np
import pytest

from cartraj.timing import QuinticTimeScaling, quintic_profile, sample_count, time_grid
from cartraj.utils.errors import (
    InvalidSamplePeriod,
    InvalidTimeWindow,
    SingularBoundaryMatrix,
)


@pytest.mark.parametrize(
    "ti,tf,qi,qf,vi,vf,ai,af",
    [
        (0.0, 2.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0),  # rest-to-rest
        (0.5, 1.5, -1.0, 2.0, 0.3, -0.2, 0.1, 0.4),  # non-zero boundary derivatives
        (1.0, 3.0, 0.7, 0.7, 0.0, 0.0, 0.0, 0.0),  # no motion
        (100.0, 102.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0),  # window far from t=0
        (1000.0, 1002.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0),
        (1000.0, 1001.5, -2.0, 3.0, 0.4, -0.1, 0.2, 0.3),
    ],
)
def test_boundary_conditions_are_met(ti, tf, qi, qf, vi, vf, ai, af):
    q = QuinticTimeScaling(ti, tf, qi, qf, vi, vf, ai, af)

    assert abs(q.position(ti) - qi) < 1e-9
    assert abs(q.velocity(ti) - vi) < 1e-9
    assert abs(q.acceleration(ti) - ai) < 1e-9
    assert abs(q.position(tf) - qf) < 1e-9
    assert abs(q.velocity(tf) - vf) < 1e-9
    assert abs(q.acceleration(tf) - af) < 1e-9
    assert all(q.validate_continuity().values())


def test_rest_to_rest_matches_normalized_quintic_blend():
    # s(τ) = 10τ^3 - 15τ^4 + 6τ^5 scaled to the distance
    q = QuinticTimeScaling(0.0, 2.0, 0.0, 5.0)
    t = np.linspace(0.0, 2.0, 41)
    tau = t / 2.0
    expected = 5.0 * (10 * tau**3 - 15 * tau**4 + 6 * tau**5)
    assert np.allclose(q.position(t), expected, atol=1e-10)


@pytest.mark.parametrize("offset", [10.0, 1000.0, -500.0])
def test_shifted_window_matches_window_at_zero(offset):
    base = QuinticTimeScaling(0.0, 2.0, 0.0, 1.0).sample(0.1)
    shifted = QuinticTimeScaling(offset, offset + 2.0, 0.0, 1.0).sample(0.1)

    assert np.allclose(shifted.time - offset, base.time)
    assert np.allclose(shifted.s, base.s, atol=1e-9)
    assert np.allclose(shifted.sd, base.sd, atol=1e-9)
    assert np.allclose(shifted.sdd, base.sdd, atol=1e-9)


def test_scalar_and_array_evaluation_agree():
    q = QuinticTimeScaling(0.0, 1.0, 0.0, 2.0, 0.5, 0.0, 0.0, 0.0)
    t = np.array([0.0, 0.25, 0.5, 1.0])
    for order in range(4):
        values = q.evaluate(t, order)
        assert values.shape == t.shape
        for ti, v in zip(t, values):
            assert q.evaluate(float(ti), order) == pytest.approx(v)


def test_evaluate_rejects_unsupported_order():
    q = QuinticTimeScaling(0.0, 1.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        q.evaluate(0.5, 4)


def test_two_second_window_at_ten_hertz():
    assert sample_count(0.0, 2.0, 0.1) == 20
    profile = QuinticTimeScaling(0.0, 2.0, 0.0, 1.0).sample(0.1)
    assert len(profile) == 20
    assert profile.s.shape == profile.sd.shape == profile.sdd.shape == (20,)


@pytest.mark.parametrize(
    "ti,tf,Ts",
    [(0.0, 2.0, 0.1), (0.0, 1.0, 0.3), (1.5, 4.0, 0.07), (-1.0, 1.0, 0.25), (0.0, 0.3, 0.1)],
)
def test_sample_count_is_floor_of_window_over_period(ti, tf, Ts):
    n = sample_count(ti, tf, Ts)
    assert n == math.floor((tf - ti) / Ts)
    assert len(time_grid(ti, tf, Ts)) == n


def test_time_grid_is_half_open():
    t = time_grid(0.0, 2.0, 0.1)
    assert t[0] == 0.0
    assert np.allclose(np.diff(t), 0.1)
    assert t[-1] == pytest.approx(1.9)
    assert np.all(t < 2.0)


def test_time_grid_starts_at_ti():
    t = time_grid(3.0, 4.0, 0.25)
    assert np.allclose(t, [3.0, 3.25, 3.5, 3.75])


def test_rest_to_rest_profile_is_monotonic():
    profile = quintic_profile(0.0, 2.0, 0.0, 1.0, 0.01)
    assert profile.s[0] == pytest.approx(0.0, abs=1e-12)
    assert profile.sd[0] == pytest.approx(0.0, abs=1e-12)
    assert np.all(np.diff(profile.s) >= -1e-12)
    assert np.all(profile.sd >= -1e-12)


def test_constant_profile_when_no_motion():
    profile = quintic_profile(0.0, 1.0, 3.0, 3.0, 0.1)
    assert np.allclose(profile.s, 3.0, atol=1e-12)
    assert np.allclose(profile.sd, 0.0, atol=1e-12)
    assert np.allclose(profile.sdd, 0.0, atol=1e-12)


@pytest.mark.parametrize("ti,tf", [(1.0, 1.0), (2.0, 1.0)])
def test_invalid_time_window(ti, tf):
    with pytest.raises(InvalidTimeWindow):
        QuinticTimeScaling(ti, tf, 0.0, 1.0)


def test_invalid_time_window_is_a_value_error():
    with pytest.raises(ValueError):
        QuinticTimeScaling(1.0, 0.0, 0.0, 1.0)


def test_non_finite_boundary_rejected():
    with pytest.raises(InvalidTimeWindow):
        QuinticTimeScaling(0.0, 1.0, 0.0, float("nan"))


@pytest.mark.parametrize("Ts", [0.0, -0.1, float("nan"), float("inf")])
def test_invalid_sample_period(Ts):
    q = QuinticTimeScaling(0.0, 1.0, 0.0, 1.0)
    with pytest.raises(InvalidSamplePeriod):
        q.sample(Ts)


def test_empty_grid_is_reported():
    # (0.05 - 0) / 0.1 floors to zero samples
    q = QuinticTimeScaling(0.0, 0.05, 0.0, 1.0)
    with pytest.raises(InvalidTimeWindow):
        q.sample(0.1)


def test_singular_boundary_matrix_surfaces_as_error(monkeypatch):
    monkeypatch.setattr(
        QuinticTimeScaling, "boundary_matrix", staticmethod(lambda ti, tf: np.zeros((6, 6)))
    )
    with pytest.raises(SingularBoundaryMatrix):
        QuinticTimeScaling(0.0, 1.0, 0.0, 1.0)


def test_boundary_matrix_layout():
    H = QuinticTimeScaling.boundary_matrix(0.0, 2.0)
    assert H.shape == (6, 6)
    assert np.allclose(H[0], [1, 0, 0, 0, 0, 0])
    assert np.allclose(H[2], [0, 0, 2, 0, 0, 0])
    assert np.allclose(H[3], [1, 2, 4, 8, 16, 32])
    assert np.allclose(H[4], [0, 1, 4, 12, 32, 80])
    assert np.allclose(H[5], [0, 0, 2, 12, 48, 160])
