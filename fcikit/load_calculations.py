"""Combining the dynamic parameters of an end effector and a payload."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def _vector(values: Sequence[float], size: int, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (size,):
        raise ValueError(f"{name} must have {size} elements, got shape {array.shape}")
    return array


def _matrix3(values: Sequence[float], name: str) -> np.ndarray:
    return _vector(values, 9, name).reshape(3, 3, order="F")


def combine_center_of_mass(
    m_ee: float,
    f_x_cee: Sequence[float],
    m_load: float,
    f_x_cload: Sequence[float],
) -> list[float]:
    """Mass-weighted centre of mass of end effector and load, in flange frame.

    Returns zeros when the total mass is not positive.
    """
    c_ee = _vector(f_x_cee, 3, "f_x_cee")
    c_load = _vector(f_x_cload, 3, "f_x_cload")
    total = m_ee + m_load
    if total > 0:
        return ((m_ee * c_ee + m_load * c_load) / total).tolist()
    return [0.0, 0.0, 0.0]


def skew_symmetric_matrix_from_vector(vector: Sequence[float]) -> np.ndarray:
    """Return the 3x3 matrix S with S @ w == cross(vector, w)."""
    x, y, z = _vector(vector, 3, "vector")
    return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])


def combine_inertia_tensor(
    m_ee: float,
    f_x_cee: Sequence[float],
    i_ee: Sequence[float],
    m_load: float,
    f_x_cload: Sequence[float],
    i_load: Sequence[float],
    m_total: float,
    f_x_ctotal: Sequence[float],
) -> list[float]:
    """Inertia tensor of the combined body about its centre of mass.

    Inertia tensors are 9 values in column-major order.
    """
    if m_total == 0:
        return [0.0] * 9

    c_ee = _vector(f_x_cee, 3, "f_x_cee")
    c_load = _vector(f_x_cload, 3, "f_x_cload")
    c_total = _vector(f_x_ctotal, 3, "f_x_ctotal")
    inertia_ee = _matrix3(i_ee, "i_ee")
    inertia_load = _matrix3(i_load, "i_load")

    if m_ee == 0:
        inertia_ee = np.zeros((3, 3))
    if m_load == 0:
        inertia_load = np.zeros((3, 3))

    s_ee = skew_symmetric_matrix_from_vector(c_ee)
    s_load = skew_symmetric_matrix_from_vector(c_load)
    s_total = skew_symmetric_matrix_from_vector(c_total)

    inertia_ee_flange = inertia_ee - m_ee * (s_ee @ s_ee)
    inertia_load_flange = inertia_load - m_load * (s_load @ s_load)
    inertia_total_flange = inertia_ee_flange + inertia_load_flange

    inertia_total = inertia_total_flange + m_total * (s_total @ s_total)
    return inertia_total.flatten(order="F").tolist()