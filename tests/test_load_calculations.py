import numpy as np
import pytest

from fcikit.load_calculations import (
    combine_center_of_mass,
    combine_inertia_tensor,
    skew_symmetric_matrix_from_vector,
)

I_EE = [0.1, 0.01, 0.02, 0.01, 0.2, 0.03, 0.02, 0.03, 0.3]
I_LOAD = [0.05, 0.0, 0.0, 0.0, 0.06, 0.0, 0.0, 0.0, 0.07]


def test_center_of_mass_zero_mass_gives_zeros():
    assert combine_center_of_mass(0.0, [1.0, 2.0, 3.0], 0.0, [4.0, 5.0, 6.0]) == [0.0, 0.0, 0.0]


def test_center_of_mass_without_load_is_ee():
    com = combine_center_of_mass(0.7, [0.1, -0.2, 0.3], 0.0, [4.0, 5.0, 6.0])
    assert com == pytest.approx([0.1, -0.2, 0.3])


def test_center_of_mass_equal_masses_is_midpoint():
    com = combine_center_of_mass(2.0, [0.0, 0.0, 0.0], 2.0, [2.0, 4.0, 6.0])
    assert com == pytest.approx([1.0, 2.0, 3.0])


def test_center_of_mass_is_symmetric_in_bodies():
    a = combine_center_of_mass(0.3, [0.1, 0.2, 0.3], 1.1, [-0.4, 0.5, 0.0])
    b = combine_center_of_mass(1.1, [-0.4, 0.5, 0.0], 0.3, [0.1, 0.2, 0.3])
    assert a == pytest.approx(b)


def test_center_of_mass_wrong_length():
    with pytest.raises(ValueError):
        combine_center_of_mass(1.0, [1.0, 2.0], 1.0, [1.0, 2.0, 3.0])


def test_skew_matches_cross_product():
    v = np.array([0.3, -1.2, 2.5])
    w = np.array([-0.7, 0.4, 1.1])
    assert skew_symmetric_matrix_from_vector(v) @ w == pytest.approx(np.cross(v, w))


def test_skew_is_antisymmetric():
    s = skew_symmetric_matrix_from_vector([1.0, 2.0, 3.0])
    assert np.allclose(s, -s.T)
    assert np.allclose(np.diag(s), 0.0)


def test_inertia_zero_total_mass():
    result = combine_inertia_tensor(0.0, [1, 1, 1], I_EE, 0.0, [1, 1, 1], I_LOAD, 0.0, [1, 1, 1])
    assert result == [0.0] * 9


def test_inertia_without_load_about_own_com_is_unchanged():
    com = [0.01, -0.02, 0.05]
    result = combine_inertia_tensor(0.73, com, I_EE, 0.0, [0.3, 0.3, 0.3], I_LOAD, 0.73, com)
    assert result == pytest.approx(I_EE)


def test_inertia_ignores_massless_load_inertia():
    com_ee = [0.0, 0.0, 0.1]
    with_load_inertia = combine_inertia_tensor(
        1.0, com_ee, I_EE, 0.0, [0.2, 0.0, 0.0], I_LOAD, 1.0, com_ee
    )
    without_load_inertia = combine_inertia_tensor(
        1.0, com_ee, I_EE, 0.0, [0.2, 0.0, 0.0], [0.0] * 9, 1.0, com_ee
    )
    assert with_load_inertia == pytest.approx(without_load_inertia)


def test_inertia_of_combined_body_is_symmetric():
    m_ee, c_ee = 0.73, [-0.01, 0.0, 0.03]
    m_load, c_load = 0.5, [0.0, 0.02, 0.1]
    m_total = m_ee + m_load
    c_total = combine_center_of_mass(m_ee, c_ee, m_load, c_load)
    result = np.array(
        combine_inertia_tensor(m_ee, c_ee, I_EE, m_load, c_load, I_LOAD, m_total, c_total)
    ).reshape(3, 3, order="F")
    assert np.allclose(result, result.T)
    assert np.all(np.linalg.eigvalsh(result) > 0)


def test_inertia_of_two_identical_coincident_bodies_doubles():
    com = [0.02, 0.03, 0.04]
    result = combine_inertia_tensor(1.0, com, I_LOAD, 1.0, com, I_LOAD, 2.0, com)
    assert result == pytest.approx([2 * value for value in I_LOAD])


def test_inertia_wrong_length():
    with pytest.raises(ValueError):
        combine_inertia_tensor(1.0, [0, 0, 0], [0.0] * 8, 1.0, [0, 0, 0], I_LOAD, 2.0, [0, 0, 0])