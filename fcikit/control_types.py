"""Command types returned by control and motion generation callbacks."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from enum import Enum
from typing import TypeVar


class ControllerMode(Enum):
    """Controllers available to execute a motion."""

    JOINT_IMPEDANCE = "joint_impedance"
    CARTESIAN_IMPEDANCE = "cartesian_impedance"


class RealtimeConfig(Enum):
    """Whether realtime scheduling is required for a control loop."""

    ENFORCE = "enforce"
    IGNORE = "ignore"


def _checked(values: Iterable[float], size: int, name: str) -> list[float]:
    result = [float(value) for value in values]
    if len(result) != size:
        raise ValueError(
            f"Invalid number of elements in {name}: expected {size}, got {len(result)}."
        )
    return result


class Finishable:
    """Base for commands that can mark the end of a motion."""

    def __init__(self) -> None:
        self.motion_finished = False

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{type(self).__name__}({fields})"


class Torques(Finishable):
    """Joint-level torque command without gravity and friction, in Nm."""

    def __init__(self, tau_j: Iterable[float]) -> None:
        super().__init__()
        self.tau_j = _checked(tau_j, 7, "tau_J")


class JointPositions(Finishable):
    """Desired joint angles in rad."""

    def __init__(self, q: Iterable[float]) -> None:
        super().__init__()
        self.q = _checked(q, 7, "q")


class JointVelocities(Finishable):
    """Desired joint velocities in rad/s."""

    def __init__(self, dq: Iterable[float]) -> None:
        super().__init__()
        self.dq = _checked(dq, 7, "dq")


class CartesianPose(Finishable):
    """Desired end effector pose in base frame, a column-major 4x4 transform.

    The optional elbow holds the third joint position and the flip
    direction of the fourth joint.
    """

    def __init__(self, o_t_ee: Iterable[float], elbow: Iterable[float] | None = None) -> None:
        super().__init__()
        self.o_t_ee = _checked(o_t_ee, 16, "O_T_EE")
        self.elbow = None if elbow is None else _checked(elbow, 2, "elbow")

    def has_elbow(self) -> bool:
        """Return True if an elbow configuration is stored."""
        return self.elbow is not None


class CartesianVelocities(Finishable):
    """Desired Cartesian velocity (vx, vy, vz, wx, wy, wz) in base frame."""

    def __init__(self, o_dp_ee: Iterable[float], elbow: Iterable[float] | None = None) -> None:
        super().__init__()
        self.o_dp_ee = _checked(o_dp_ee, 6, "O_dP_EE")
        self.elbow = None if elbow is None else _checked(elbow, 2, "elbow")

    def has_elbow(self) -> bool:
        """Return True if an elbow configuration is stored."""
        return self.elbow is not None


_F = TypeVar("_F", bound=Finishable)


def motion_finished(command: _F) -> _F:
    """Return a copy of the command marked as the last one of the motion."""
    if not isinstance(command, Finishable):
        raise TypeError(f"expected a command, got {type(command).__name__}")
    finished = copy.deepcopy(command)
    finished.motion_finished = True
    return finished