"""Ring buffer of recent robot states and commands, with CSV export."""

from __future__ import annotations

import copy
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import timedelta

from .control_types import (
    CartesianPose,
    CartesianVelocities,
    JointPositions,
    JointVelocities,
    Torques,
)


def _zeros(size: int):
    return lambda: [0.0] * size


@dataclass
class LoggedState:
    """The part of the robot state that is kept in the log."""

    time: timedelta = field(default_factory=timedelta)
    control_command_success_rate: float = 0.0
    q: list[float] = field(default_factory=_zeros(7))
    q_d: list[float] = field(default_factory=_zeros(7))
    dq: list[float] = field(default_factory=_zeros(7))
    dq_d: list[float] = field(default_factory=_zeros(7))
    tau_j: list[float] = field(default_factory=_zeros(7))
    tau_ext_hat_filtered: list[float] = field(default_factory=_zeros(7))


@dataclass
class RawCommand:
    """Command as sent to the controller in one control cycle."""

    q_c: list[float] = field(default_factory=_zeros(7))
    dq_c: list[float] = field(default_factory=_zeros(7))
    o_t_ee_c: list[float] = field(default_factory=_zeros(16))
    o_dp_ee_c: list[float] = field(default_factory=_zeros(6))
    tau_j_d: list[float] = field(default_factory=_zeros(7))


@dataclass
class RobotCommand:
    """Command of one control cycle, in terms of the command types."""

    joint_positions: JointPositions = field(default_factory=lambda: JointPositions([0.0] * 7))
    joint_velocities: JointVelocities = field(
        default_factory=lambda: JointVelocities([0.0] * 7)
    )
    cartesian_pose: CartesianPose = field(default_factory=lambda: CartesianPose([0.0] * 16))
    cartesian_velocities: CartesianVelocities = field(
        default_factory=lambda: CartesianVelocities([0.0] * 6)
    )
    torques: Torques = field(default_factory=lambda: Torques([0.0] * 7))


@dataclass
class Record:
    """One log entry: a state and the command sent in reply."""

    state: LoggedState
    command: RobotCommand


def _to_robot_command(raw: RawCommand) -> RobotCommand:
    return RobotCommand(
        joint_positions=JointPositions(raw.q_c),
        joint_velocities=JointVelocities(raw.dq_c),
        cartesian_pose=CartesianPose(raw.o_t_ee_c),
        cartesian_velocities=CartesianVelocities(raw.o_dp_ee_c),
        torques=Torques(raw.tau_j_d),
    )


class Logger:
    """Keeps the last ``log_size`` states and commands, oldest first."""

    def __init__(self, log_size: int) -> None:
        if log_size < 0:
            raise ValueError("log_size must not be negative")
        self._entries: deque[tuple[LoggedState, RawCommand]] = deque(maxlen=log_size)

    def log(self, state: LoggedState, command: RawCommand) -> None:
        """Store a copy of the state and command, dropping the oldest when full."""
        if self._entries.maxlen == 0:
            return
        self._entries.append((copy.deepcopy(state), copy.deepcopy(command)))

    def flush(self) -> list[Record]:
        """Return the stored entries oldest first and empty the log."""
        records = [Record(state, _to_robot_command(raw)) for state, raw in self._entries]
        self._entries.clear()
        return records


def _names(name: str, size: int) -> str:
    return ",".join(f"{name}[{index}]" for index in range(size))


_STATE_HEADER = ",".join(
    [
        "time",
        "success_rate",
        _names("state.q", 7),
        _names("state.q_d", 7),
        _names("state.dq", 7),
        _names("state.dq_d", 7),
        _names("state.tau_J", 7),
        _names("state.tau_ext_hat_filtered", 7),
    ]
)

_COMMAND_HEADER = ",".join(
    [
        _names("cmd.q_d", 7),
        _names("cmd.dq_d", 7),
        _names("cmd.O_T_EE_d", 16),
        _names("cmd.O_dP_EE_d", 6),
        _names("cmd.tau_J_d", 7),
    ]
)


def _values(values: Iterable[float]) -> str:
    return ",".join(f"{value:g}" for value in values)


def _state_line(state: LoggedState) -> str:
    milliseconds = state.time // timedelta(milliseconds=1)
    return ",".join(
        [
            str(milliseconds),
            f"{state.control_command_success_rate:g}",
            _values(state.q),
            _values(state.q_d),
            _values(state.dq),
            _values(state.dq_d),
            _values(state.tau_j),
            _values(state.tau_ext_hat_filtered),
        ]
    )


def _command_line(command: RobotCommand) -> str:
    return ",".join(
        [
            _values(command.joint_positions.q),
            _values(command.joint_velocities.dq),
            _values(command.cartesian_pose.o_t_ee),
            _values(command.cartesian_velocities.o_dp_ee),
            _values(command.torques.tau_j),
        ]
    )


def log_to_csv(log: Sequence[Record]) -> str:
    """Render a log as CSV with a header line; an empty log gives ''."""
    if not log:
        return ""
    lines = [f"{_STATE_HEADER},{_COMMAND_HEADER}"]
    lines.extend(f"{_state_line(r.state)},{_command_line(r.command)}" for r in log)
    return "\n".join(lines) + "\n"