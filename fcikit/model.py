"""Robot kinematics and dynamics computed through the model library."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from typing import Any

import numpy as np

from .exceptions import ModelException

_IDENTITY = (1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)


class Frame(IntEnum):
    """Frames along the kinematic chain, from the first joint to the stiffness frame."""

    JOINT1 = 0
    JOINT2 = 1
    JOINT3 = 2
    JOINT4 = 3
    JOINT5 = 4
    JOINT6 = 5
    JOINT7 = 6
    FLANGE = 7
    END_EFFECTOR = 8
    STIFFNESS = 9


_CHAIN = {
    Frame.JOINT1: "joint1",
    Frame.JOINT2: "joint2",
    Frame.JOINT3: "joint3",
    Frame.JOINT4: "joint4",
    Frame.JOINT5: "joint5",
    Frame.JOINT6: "joint6",
    Frame.JOINT7: "joint7",
    Frame.FLANGE: "flange",
}


def _frame(frame: Any) -> Frame:
    try:
        return Frame(frame)
    except (ValueError, TypeError):
        raise ValueError("Invalid frame given.") from None


def _values(values: Sequence[float], size: int, name: str) -> list[float]:
    result = [float(value) for value in values]
    if len(result) != size:
        raise ValueError(f"{name} must have {size} elements, got {len(result)}")
    return result


def _output(values: Any, size: int, name: str) -> list[float]:
    result = [float(value) for value in values]
    if len(result) != size:
        raise ModelException(
            f"fcikit: Model function {name} returned {len(result)} values, expected {size}"
        )
    return result


def _compose(f_t_ee: list[float], ee_t_k: list[float]) -> list[float]:
    product = np.reshape(f_t_ee, (4, 4), order="F") @ np.reshape(ee_t_k, (4, 4), order="F")
    return product.flatten(order="F").tolist()


class Model:
    """Computes poses, Jacobians and dynamic terms with a model library.

    Matrices are flat lists in column-major order.
    """

    def __init__(self, library: Any) -> None:
        self._library = library

    def _chain_call(
        self,
        prefix: str,
        frame: Any,
        q: Sequence[float],
        f_t_ee: Sequence[float],
        ee_t_k: Sequence[float],
        size: int,
        joint1_needs_q: bool,
    ) -> list[float]:
        frame = _frame(frame)
        q_values = _values(q, 7, "q")
        f_t_ee_values = _values(f_t_ee, 16, "f_t_ee")
        ee_t_k_values = _values(ee_t_k, 16, "ee_t_k")

        if frame in _CHAIN:
            name = prefix + _CHAIN[frame]
            function = getattr(self._library, name)
            if frame is Frame.JOINT1 and not joint1_needs_q:
                result = function()
            else:
                result = function(q_values)
        else:
            name = prefix + "ee"
            function = getattr(self._library, name)
            transform = (
                f_t_ee_values
                if frame is Frame.END_EFFECTOR
                else _compose(f_t_ee_values, ee_t_k_values)
            )
            result = function(q_values, transform)
        return _output(result, size, name)

    def pose(
        self,
        frame: Frame,
        q: Sequence[float],
        f_t_ee: Sequence[float] = _IDENTITY,
        ee_t_k: Sequence[float] = _IDENTITY,
    ) -> list[float]:
        """Return the 4x4 pose of the frame in base frame."""
        return self._chain_call("", frame, q, f_t_ee, ee_t_k, 16, True)

    def body_jacobian(
        self,
        frame: Frame,
        q: Sequence[float],
        f_t_ee: Sequence[float] = _IDENTITY,
        ee_t_k: Sequence[float] = _IDENTITY,
    ) -> list[float]:
        """Return the 6x7 Jacobian of the frame relative to the frame itself."""
        return self._chain_call("body_jacobian_", frame, q, f_t_ee, ee_t_k, 42, False)

    def zero_jacobian(
        self,
        frame: Frame,
        q: Sequence[float],
        f_t_ee: Sequence[float] = _IDENTITY,
        ee_t_k: Sequence[float] = _IDENTITY,
    ) -> list[float]:
        """Return the 6x7 Jacobian of the frame relative to the base frame."""
        return self._chain_call("zero_jacobian_", frame, q, f_t_ee, ee_t_k, 42, False)

    def mass(
        self,
        q: Sequence[float],
        i_total: Sequence[float],
        m_total: float,
        f_x_ctotal: Sequence[float],
    ) -> list[float]:
        """Return the 7x7 mass matrix."""
        result = self._library.mass(
            _values(q, 7, "q"),
            _values(i_total, 9, "i_total"),
            float(m_total),
            _values(f_x_ctotal, 3, "f_x_ctotal"),
        )
        return _output(result, 49, "mass")

    def coriolis(
        self,
        q: Sequence[float],
        dq: Sequence[float],
        i_total: Sequence[float],
        m_total: float,
        f_x_ctotal: Sequence[float],
    ) -> list[float]:
        """Return the Coriolis force vector in Nm."""
        result = self._library.coriolis(
            _values(q, 7, "q"),
            _values(dq, 7, "dq"),
            _values(i_total, 9, "i_total"),
            float(m_total),
            _values(f_x_ctotal, 3, "f_x_ctotal"),
        )
        return _output(result, 7, "coriolis")

    def gravity(
        self,
        q: Sequence[float],
        m_total: float,
        f_x_ctotal: Sequence[float],
        gravity_earth: Sequence[float],
    ) -> list[float]:
        """Return the gravity torque vector in Nm."""
        result = self._library.gravity(
            _values(q, 7, "q"),
            _values(gravity_earth, 3, "gravity_earth"),
            float(m_total),
            _values(f_x_ctotal, 3, "f_x_ctotal"),
        )
        return _output(result, 7, "gravity")