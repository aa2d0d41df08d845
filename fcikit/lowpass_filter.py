"""First-order low-pass filters for scalar signals and Cartesian poses."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

DEFAULT_CUTOFF_FREQUENCY = 100.0
MAX_CUTOFF_FREQUENCY = 1000.0

_SLERP_EPSILON = 1e-12


def _gain(sample_time: float, cutoff_frequency: float) -> float:
    return sample_time / (sample_time + 1.0 / (2.0 * math.pi * cutoff_frequency))


def _check_parameters(prefix: str, sample_time: float, cutoff_frequency: float) -> None:
    if sample_time < 0 or not math.isfinite(sample_time):
        raise ValueError(f"{prefix}: sample_time is negative, infinite or NaN.")
    if cutoff_frequency <= 0 or not math.isfinite(cutoff_frequency):
        raise ValueError(f"{prefix}: cutoff_frequency is zero, negative, infinite or NaN.")


def lowpass_filter(sample_time: float, y: float, y_last: float, cutoff_frequency: float) -> float:
    """Filter one sample of a scalar signal.

    Raises ValueError for a negative or non-finite sample time, a non-positive
    or non-finite cutoff frequency, or non-finite samples.
    """
    _check_parameters("lowpass-filter", sample_time, cutoff_frequency)
    if not math.isfinite(y) or not math.isfinite(y_last):
        raise ValueError(
            "lowpass-filter: current or past input value of the signal to be filtered is "
            "infinite or NaN."
        )
    gain = _gain(sample_time, cutoff_frequency)
    return gain * y + (1 - gain) * y_last


def _polar_rotation(linear: np.ndarray) -> np.ndarray:
    u, _, vh = np.linalg.svd(linear)
    x = -1.0 if np.linalg.det(u) * np.linalg.det(vh) < 0 else 1.0
    u = u.copy()
    u[:, 2] *= x
    return u @ vh


def _quaternion_from_matrix(m: np.ndarray) -> np.ndarray:
    """Return (w, x, y, z) for a rotation matrix."""
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0:
        t = math.sqrt(trace + 1.0)
        w = 0.5 * t
        t = 0.5 / t
        return np.array(
            [w, (m[2, 1] - m[1, 2]) * t, (m[0, 2] - m[2, 0]) * t, (m[1, 0] - m[0, 1]) * t]
        )
    i = 0
    if m[1, 1] > m[0, 0]:
        i = 1
    if m[2, 2] > m[i, i]:
        i = 2
    j = (i + 1) % 3
    k = (j + 1) % 3
    t = math.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
    vec = np.zeros(3)
    vec[i] = 0.5 * t
    t = 0.5 / t
    w = (m[k, j] - m[j, k]) * t
    vec[j] = (m[j, i] + m[i, j]) * t
    vec[k] = (m[k, i] + m[i, k]) * t
    return np.array([w, *vec])


def _slerp(q_from: np.ndarray, q_to: np.ndarray, t: float) -> np.ndarray:
    d = float(np.dot(q_from, q_to))
    abs_d = abs(d)
    if abs_d >= 1.0 - _SLERP_EPSILON:
        scale0, scale1 = 1.0 - t, t
    else:
        theta = math.acos(abs_d)
        sin_theta = math.sin(theta)
        scale0 = math.sin((1.0 - t) * theta) / sin_theta
        scale1 = math.sin(t * theta) / sin_theta
    if d < 0:
        scale1 = -scale1
    return scale0 * q_from + scale1 * q_to


def _matrix_from_quaternion(q: np.ndarray) -> np.ndarray:
    w, x, y, z = q / np.linalg.norm(q)
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
    )


def cartesian_lowpass_filter(
    sample_time: float,
    y: Sequence[float],
    y_last: Sequence[float],
    cutoff_frequency: float,
) -> list[float]:
    """Filter one sample of a pose given as a column-major 4x4 transform.

    Translation is filtered linearly, orientation by spherical interpolation.
    """
    prefix = "Cartesian lowpass-filter"
    _check_parameters(prefix, sample_time, cutoff_frequency)
    current = np.asarray(y, dtype=float)
    last = np.asarray(y_last, dtype=float)
    if current.shape != (16,) or last.shape != (16,):
        raise ValueError(f"{prefix}: poses must have 16 elements.")
    if not (np.all(np.isfinite(current)) and np.all(np.isfinite(last))):
        raise ValueError(
            f"{prefix}: current or past input value of the signal to be filtered is "
            "infinite or NaN."
        )

    transform = current.reshape(4, 4, order="F").copy()
    transform_last = last.reshape(4, 4, order="F")

    orientation = _quaternion_from_matrix(_polar_rotation(transform[:3, :3]))
    orientation_last = _quaternion_from_matrix(_polar_rotation(transform_last[:3, :3]))

    gain = _gain(sample_time, cutoff_frequency)
    transform[:3, 3] = gain * transform[:3, 3] + (1.0 - gain) * transform_last[:3, 3]
    transform[:3, :3] = _matrix_from_quaternion(_slerp(orientation_last, orientation, gain))

    return transform.flatten(order="F").tolist()