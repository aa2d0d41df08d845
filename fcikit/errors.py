"""Set of error flags reported by the robot controller."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class ErrorKind(IntEnum):
    """Error flags, in the order the controller reports them."""

    JOINT_POSITION_LIMITS_VIOLATION = 0
    CARTESIAN_POSITION_LIMITS_VIOLATION = 1
    SELF_COLLISION_AVOIDANCE_VIOLATION = 2
    JOINT_VELOCITY_VIOLATION = 3
    CARTESIAN_VELOCITY_VIOLATION = 4
    FORCE_CONTROL_SAFETY_VIOLATION = 5
    JOINT_REFLEX = 6
    CARTESIAN_REFLEX = 7
    MAX_GOAL_POSE_DEVIATION_VIOLATION = 8
    MAX_PATH_POSE_DEVIATION_VIOLATION = 9
    CARTESIAN_VELOCITY_PROFILE_SAFETY_VIOLATION = 10
    JOINT_POSITION_MOTION_GENERATOR_START_POSE_INVALID = 11
    JOINT_MOTION_GENERATOR_POSITION_LIMITS_VIOLATION = 12
    JOINT_MOTION_GENERATOR_VELOCITY_LIMITS_VIOLATION = 13
    JOINT_MOTION_GENERATOR_VELOCITY_DISCONTINUITY = 14
    JOINT_MOTION_GENERATOR_ACCELERATION_DISCONTINUITY = 15
    CARTESIAN_POSITION_MOTION_GENERATOR_START_POSE_INVALID = 16
    CARTESIAN_MOTION_GENERATOR_ELBOW_LIMIT_VIOLATION = 17
    CARTESIAN_MOTION_GENERATOR_VELOCITY_LIMITS_VIOLATION = 18
    CARTESIAN_MOTION_GENERATOR_VELOCITY_DISCONTINUITY = 19
    CARTESIAN_MOTION_GENERATOR_ACCELERATION_DISCONTINUITY = 20
    CARTESIAN_MOTION_GENERATOR_ELBOW_SIGN_INCONSISTENT = 21
    CARTESIAN_MOTION_GENERATOR_START_ELBOW_INVALID = 22
    CARTESIAN_MOTION_GENERATOR_JOINT_POSITION_LIMITS_VIOLATION = 23
    CARTESIAN_MOTION_GENERATOR_JOINT_VELOCITY_LIMITS_VIOLATION = 24
    CARTESIAN_MOTION_GENERATOR_JOINT_VELOCITY_DISCONTINUITY = 25
    CARTESIAN_MOTION_GENERATOR_JOINT_ACCELERATION_DISCONTINUITY = 26
    CARTESIAN_POSITION_MOTION_GENERATOR_INVALID_FRAME = 27
    FORCE_CONTROLLER_DESIRED_FORCE_TOLERANCE_VIOLATION = 28
    CONTROLLER_TORQUE_DISCONTINUITY = 29
    START_ELBOW_SIGN_INCONSISTENT = 30
    COMMUNICATION_CONSTRAINTS_VIOLATION = 31
    POWER_LIMIT_VIOLATION = 32
    JOINT_P2P_INSUFFICIENT_TORQUE_FOR_PLANNING = 33
    TAU_J_RANGE_VIOLATION = 34
    INSTABILITY_DETECTED = 35
    JOINT_MOVE_IN_WRONG_DIRECTION = 36
    CARTESIAN_SPLINE_MOTION_GENERATOR_VIOLATION = 37
    JOINT_VIA_MOTION_GENERATOR_PLANNING_JOINT_LIMIT_VIOLATION = 38
    BASE_ACCELERATION_INITIALIZATION_TIMEOUT = 39
    BASE_ACCELERATION_INVALID_READING = 40

    @property
    def label(self) -> str:
        """Lower-case name used in textual output."""
        return self.name.lower()


_BY_LABEL = {kind.label: kind for kind in ErrorKind}


class Errors:
    """Immutable set of controller error flags.

    Each flag is also readable as an attribute named after its label,
    e.g. ``errors.joint_reflex``.
    """

    __slots__ = ("_flags",)

    def __init__(self, flags: Iterable[bool] | None = None) -> None:
        if flags is None:
            values = (False,) * len(ErrorKind)
        else:
            values = tuple(bool(flag) for flag in flags)
        if len(values) != len(ErrorKind):
            raise ValueError(f"expected {len(ErrorKind)} error flags, got {len(values)}")
        object.__setattr__(self, "_flags", values)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Errors is immutable")

    def __getattr__(self, name: str) -> bool:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            kind = _BY_LABEL[name]
        except KeyError:
            raise AttributeError(name) from None
        return self._flags[kind]

    def __getitem__(self, kind: ErrorKind) -> bool:
        return self._flags[ErrorKind(kind)]

    def __bool__(self) -> bool:
        return any(self._flags)

    def active(self) -> list[ErrorKind]:
        """Return the set flags in controller order."""
        return [kind for kind, flag in zip(ErrorKind, self._flags) if flag]

    def __str__(self) -> str:
        return "[" + ", ".join(f'"{kind.label}"' for kind in self.active()) + "]"

    def __repr__(self) -> str:
        return f"Errors({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Errors):
            return NotImplemented
        return self._flags == other._flags

    def __hash__(self) -> int:
        return hash(self._flags)