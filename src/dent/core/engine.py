"""
The Dent engine.

Usage:
    from dent import Dent

    dent = Dent.default()
    dent.parse("{ name: Mario skills: [ jumps grows ] }")
    # {'name': 'Mario', 'skills': ['jumps', 'grows']}

    dent.add_function("count", lambda v: len(v) if isinstance(v, list) else None)
    dent.parse("@count [ 1 2 3 ]")
    # 3

One engine may be shared by many threads. Its function registry and import
cache are guarded by a single lock that is never held while parsing, reading
files, or running extension functions.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from pathlib import Path

from dent.core.builtins import builtin_functions
from dent.core.imports import ImportCache
from dent.core.parser import parse_text
from dent.core.registry import DentFunction, FunctionRegistry
from dent.core.settings import DentSettings
from dent.core.values import Value


class Dent:
    """Parser engine owning extension functions and the import cache."""

    def __init__(
        self,
        functions: Mapping[str, DentFunction] | None = None,
        *,
        settings: DentSettings | None = None,
    ) -> None:
        self.settings = settings or DentSettings()
        self._lock = threading.Lock()
        self._functions = FunctionRegistry(self._lock)
        self._imports = ImportCache(
            self._functions, self._lock, encoding=self.settings.encoding
        )
        for name, function in (functions or {}).items():
            self._functions.register(name, function)

    @classmethod
    def default(cls, settings: DentSettings | None = None) -> Dent:
        """Engine with the built-in ``import`` and ``merge`` functions."""
        dent = cls(settings=settings)
        dent.add_builtins()
        return dent

    @classmethod
    def from_settings(cls, settings: DentSettings) -> Dent:
        """Engine configured from settings, with built-ins if enabled."""
        if settings.builtins:
            return cls.default(settings)
        return cls(settings=settings)

    @property
    def functions(self) -> FunctionRegistry:
        return self._functions

    @property
    def imports(self) -> ImportCache:
        return self._imports

    def add_builtins(self) -> None:
        """Register ``import`` and ``merge``, replacing same-named functions."""
        for name, function in builtin_functions(self._imports).items():
            self._functions.register(name, function)

    def add_function(self, name: str, function: DentFunction) -> None:
        """Register a function callable from Dent as ``@name value``."""
        self._functions.register(name, function)

    def remove_function(self, name: str) -> bool:
        return self._functions.unregister(name)

    def parse(self, text: str) -> Value:
        """Parse Dent text.

        Raises:
            ParseError: If the text is malformed or calls an unknown function.
        """
        return parse_text(text, self._functions)

    def parse_file(self, path: str | Path) -> Value:
        """Parse a Dent file through the import cache.

        Parsing the same file again returns a fresh copy of the cached value.

        Raises:
            DentIOError: If the file cannot be resolved, read, or decoded.
            ParseError: If the file is not valid Dent.
        """
        return self._imports.load(path)
