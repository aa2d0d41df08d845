"""Access to the symbols of a loaded model library."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import ModelException


class LibraryLoader:
    """Holds a model library given as a mapping of names or an object with attributes."""

    def __init__(self, symbols: Mapping[str, Callable[..., Any]] | object) -> None:
        if symbols is None:
            raise ModelException("fcikit: Error while loading library: no library given")
        self._symbols = symbols

    def get_symbol(self, symbol_name: str) -> Callable[..., Any]:
        """Return the named function of the library.

        Raises ModelException if it is missing or not callable.
        """
        if isinstance(self._symbols, Mapping):
            try:
                symbol = self._symbols[symbol_name]
            except KeyError:
                raise ModelException(
                    f"fcikit: Symbol cannot be found: {symbol_name}"
                ) from None
        else:
            try:
                symbol = getattr(self._symbols, symbol_name)
            except AttributeError:
                raise ModelException(
                    f"fcikit: Symbol cannot be found: {symbol_name}"
                ) from None
        if not callable(symbol):
            raise ModelException(
                f"fcikit: Error while fetching symbols: {symbol_name} is not callable"
            )
        return symbol