import math

import numpy as np
import pytest

from fcikit.lowpass_filter import cartesian_lowpass_filter, lowpass_filter

IDENTITY = [1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0]


def _rot_z(angle, translation=(0.0, 0.0, 0.0)):
    m = np.eye(4)
    c, s = math.cos(angle), math.sin(angle)
    m[:3, :3] = [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]
    m[:3, 3] = translation
    return m.flatten(order="F").tolist()


def _as_matrix(values):
    return np.array(values).reshape(4, 4, order="F")


def test_zero_sample_time_returns_last_value():
    assert lowpass_filter(0.0, 5.0, 2.0, 100.0) == 2.0


def test_result_lies_between_samples():
    value = lowpass_filter(0.001, 5.0, 2.0, 100.0)
    assert 2.0 < value < 5.0


def test_higher_cutoff_follows_signal_more_closely():
    low = lowpass_filter(0.001, 1.0, 0.0, 10.0)
    high = lowpass_filter(0.001, 1.0, 0.0, 1000.0)
    assert low < high < 1.0


def test_constant_signal_is_unchanged():
    assert lowpass_filter(0.001, 3.5, 3.5, 100.0) == pytest.approx(3.5)


@pytest.mark.parametrize("sample_time", [-0.001, math.inf, math.nan])
def test_invalid_sample_time(sample_time):
    with pytest.raises(ValueError, match="sample_time"):
        lowpass_filter(sample_time, 1.0, 0.0, 100.0)


@pytest.mark.parametrize("cutoff", [0.0, -1.0, math.inf, math.nan])
def test_invalid_cutoff(cutoff):
    with pytest.raises(ValueError, match="cutoff_frequency"):
        lowpass_filter(0.001, 1.0, 0.0, cutoff)


@pytest.mark.parametrize("y, y_last", [(math.nan, 0.0), (0.0, math.inf), (-math.inf, 1.0)])
def test_invalid_samples(y, y_last):
    with pytest.raises(ValueError, match="infinite or NaN"):
        lowpass_filter(0.001, y, y_last, 100.0)


def test_cartesian_identity_stays_identity():
    result = cartesian_lowpass_filter(0.001, IDENTITY, IDENTITY, 100.0)
    assert result == pytest.approx(IDENTITY)


def test_cartesian_zero_sample_time_returns_last_pose():
    last = _rot_z(0.3, (0.1, 0.2, 0.3))
    result = cartesian_lowpass_filter(0.0, _rot_z(0.8, (1.0, 2.0, 3.0)), last, 100.0)
    assert result == pytest.approx(last, abs=1e-9)


def test_cartesian_translation_matches_scalar_filter():
    y = _rot_z(0.0, (1.0, -2.0, 0.5))
    y_last = _rot_z(0.0, (0.0, 1.0, 0.25))
    result = _as_matrix(cartesian_lowpass_filter(0.001, y, y_last, 50.0))
    expected = [
        lowpass_filter(0.001, a, b, 50.0) for a, b in zip(y[12:15], y_last[12:15])
    ]
    assert result[:3, 3] == pytest.approx(expected)


def test_cartesian_rotation_interpolates_angle():
    angle = 0.6
    result = _as_matrix(cartesian_lowpass_filter(0.002, _rot_z(angle), IDENTITY, 30.0))
    rotation = result[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.eye(3))
    assert np.linalg.det(rotation) == pytest.approx(1.0)
    assert rotation[2, 2] == pytest.approx(1.0)
    filtered_angle = math.atan2(rotation[1, 0], rotation[0, 0])
    gain = lowpass_filter(0.002, 1.0, 0.0, 30.0)
    assert filtered_angle == pytest.approx(gain * angle)


def test_cartesian_keeps_homogeneous_row():
    result = _as_matrix(cartesian_lowpass_filter(0.001, _rot_z(1.0, (1, 1, 1)), IDENTITY, 100.0))
    assert result[3].tolist() == pytest.approx([0.0, 0.0, 0.0, 1.0])


def test_cartesian_invalid_pose_value():
    bad = list(IDENTITY)
    bad[5] = math.nan
    with pytest.raises(ValueError, match="infinite or NaN"):
        cartesian_lowpass_filter(0.001, bad, IDENTITY, 100.0)


def test_cartesian_invalid_parameters():
    with pytest.raises(ValueError, match="sample_time"):
        cartesian_lowpass_filter(-1.0, IDENTITY, IDENTITY, 100.0)
    with pytest.raises(ValueError, match="cutoff_frequency"):
        cartesian_lowpass_filter(0.001, IDENTITY, IDENTITY, 0.0)


def test_cartesian_wrong_length():
    with pytest.raises(ValueError):
        cartesian_lowpass_filter(0.001, IDENTITY[:15], IDENTITY, 100.0)