"""State of the gripper as reported by the controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class GripperState:
    """Gripper state: widths in m, temperature in degrees Celsius."""

    width: float = 0.0
    max_width: float = 0.0
    is_grasped: bool = False
    temperature: int = 0
    time: timedelta = field(default_factory=timedelta)

    def __str__(self) -> str:
        return (
            f'{{"width": {self.width:g}, "max_width": {self.max_width:g}, '
            f'"is_grasped": {int(self.is_grasped)}, "temperature": {self.temperature}, '
            f'"time": {self.time.total_seconds():g}}}'
        )