"""
Function registry for Dent extension functions.

Extension functions are invoked from Dent text as ``@name value``. Each takes
one parsed value and returns one value. A function that needs the engine
(such as ``import``) captures it when it is created instead of receiving it
as an argument.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from dent.core.values import Value

logger = logging.getLogger(__name__)


class DentFunction(Protocol):
    """Callable invoked via ``@name`` with the parsed argument value."""

    def __call__(self, value: Value, /) -> Value: ...


class FunctionRegistry:
    """Name to function mapping, safe to share between threads.

    The lock is the engine's lock and is only held for the dictionary
    operation itself; functions always run outside it.
    """

    def __init__(self, lock: threading.Lock | None = None) -> None:
        self._lock = lock or threading.Lock()
        self._functions: dict[str, DentFunction] = {}

    def register(self, name: str, function: DentFunction) -> None:
        """Register ``function`` under ``name``, replacing any previous entry."""
        with self._lock:
            replaced = name in self._functions
            self._functions[name] = function
        if replaced:
            logger.debug("Replaced Dent function %s", name)

    def unregister(self, name: str) -> bool:
        """Remove a function. Returns False if it was not registered."""
        with self._lock:
            return self._functions.pop(name, None) is not None

    def lookup(self, name: str) -> DentFunction | None:
        with self._lock:
            return self._functions.get(name)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._functions)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._functions

    def __len__(self) -> int:
        with self._lock:
            return len(self._functions)
