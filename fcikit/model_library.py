"""Named functions of the robot model library."""

from __future__ import annotations

from .library_loader import LibraryLoader

_SYMBOLS = {
    "body_jacobian_joint1": "Ji_J_J1",
    "body_jacobian_joint2": "Ji_J_J2",
    "body_jacobian_joint3": "Ji_J_J3",
    "body_jacobian_joint4": "Ji_J_J4",
    "body_jacobian_joint5": "Ji_J_J5",
    "body_jacobian_joint6": "Ji_J_J6",
    "body_jacobian_joint7": "Ji_J_J7",
    "body_jacobian_flange": "Ji_J_J8",
    "body_jacobian_ee": "Ji_J_J9",
    "mass": "M_NE",
    "zero_jacobian_joint1": "O_J_J1",
    "zero_jacobian_joint2": "O_J_J2",
    "zero_jacobian_joint3": "O_J_J3",
    "zero_jacobian_joint4": "O_J_J4",
    "zero_jacobian_joint5": "O_J_J5",
    "zero_jacobian_joint6": "O_J_J6",
    "zero_jacobian_joint7": "O_J_J7",
    "zero_jacobian_flange": "O_J_J8",
    "zero_jacobian_ee": "O_J_J9",
    "joint1": "O_T_J1",
    "joint2": "O_T_J2",
    "joint3": "O_T_J3",
    "joint4": "O_T_J4",
    "joint5": "O_T_J5",
    "joint6": "O_T_J6",
    "joint7": "O_T_J7",
    "flange": "O_T_J8",
    "ee": "O_T_J9",
    "coriolis": "c_NE",
    "gravity": "g_NE",
}


class ModelLibrary:
    """Resolves every model function of a library up front.

    Each function is available as an attribute, e.g. ``library.joint1``;
    a missing one raises ModelException on construction.
    """

    def __init__(self, loader: LibraryLoader) -> None:
        self._loader = loader
        self._functions = {
            attribute: loader.get_symbol(symbol) for attribute, symbol in _SYMBOLS.items()
        }

    def __getattr__(self, name: str):
        functions = self.__dict__.get("_functions", {})
        try:
            return functions[name]
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self):
        return [*super().__dir__(), *_SYMBOLS]