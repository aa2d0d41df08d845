"""Client for the gripper: commands over a request channel, state over datagrams."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Protocol

from .exceptions import CommandException, ProtocolException
from .gripper_state import GripperState


class CommandStatus(Enum):
    """Status the gripper server reports for a command."""

    SUCCESS = 0
    FAIL = 1
    UNSUCCESSFUL = 2
    ABORTED = 3


class GripperCommand(Enum):
    """Commands understood by the gripper server."""

    HOMING = "homing"
    GRASP = "grasp"
    MOVE = "move"
    STOP = "stop"


@dataclass
class RawGripperState:
    """Gripper state as received from the server."""

    message_id: int = 0
    width: float = 0.0
    max_width: float = 0.0
    is_grasped: bool = False
    temperature: int = 0


class GripperTransport(Protocol):
    """Connection to the gripper server."""

    def connect(self) -> int:
        """Perform the handshake and return the server version.

        Raises IncompatibleVersionException if the versions do not match.
        """

    def send_request(self, command: GripperCommand, *args: Any) -> int:
        """Send a command and return its command id."""

    def receive_response(self, command: GripperCommand, command_id: int) -> Any:
        """Block until the response to the command arrives and return its status."""

    def udp_receive(self) -> RawGripperState | None:
        """Return a buffered state, or None if none is waiting."""

    def udp_blocking_receive(self) -> RawGripperState:
        """Wait for the next state and return it."""


def convert_gripper_state(raw: RawGripperState) -> GripperState:
    """Turn a received state into a GripperState; the message id counts milliseconds."""
    return GripperState(
        width=raw.width,
        max_width=raw.max_width,
        is_grasped=raw.is_grasped,
        temperature=raw.temperature,
        time=timedelta(milliseconds=raw.message_id),
    )


class Gripper:
    """Controls the gripper through a transport."""

    def __init__(self, transport: GripperTransport) -> None:
        self._transport = transport
        self._server_version = transport.connect()

    def server_version(self) -> int:
        """Return the version reported by the server on connection."""
        return self._server_version

    def _execute(self, command: GripperCommand, *args: Any) -> bool:
        command_id = self._transport.send_request(command, *args)
        status = self._transport.receive_response(command, command_id)
        try:
            status = CommandStatus(status)
        except ValueError:
            raise ProtocolException(
                "fcikit gripper: Unexpected response while handling command!"
            ) from None
        if status is CommandStatus.SUCCESS:
            return True
        if status is CommandStatus.UNSUCCESSFUL:
            return False
        if status is CommandStatus.FAIL:
            raise CommandException("fcikit gripper: Command failed!")
        raise CommandException("fcikit gripper: Command aborted!")

    def homing(self) -> bool:
        """Calibrate the maximum width; return False if unsuccessful."""
        return self._execute(GripperCommand.HOMING)

    def grasp(
        self,
        width: float,
        speed: float,
        force: float,
        epsilon_inner: float = 0.005,
        epsilon_outer: float = 0.005,
    ) -> bool:
        """Grasp an object of the given width; return True if it was grasped."""
        epsilon = (epsilon_inner, epsilon_outer)
        return self._execute(GripperCommand.GRASP, width, epsilon, speed, force)

    def move(self, width: float, speed: float) -> bool:
        """Move the fingers to the given width."""
        return self._execute(GripperCommand.MOVE, width, speed)

    def stop(self) -> bool:
        """Stop a running command."""
        return self._execute(GripperCommand.STOP)

    def read_once(self) -> GripperState:
        """Discard buffered states and return the next fresh one."""
        while self._transport.udp_receive() is not None:
            pass
        return convert_gripper_state(self._transport.udp_blocking_receive())