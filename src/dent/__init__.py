"""
Dent - a compact configuration and data-interchange language.

Parses scalars, lists, and dictionaries, calls host-registered extension
functions at parse time (``@name value``), and imports other Dent files with
cycle-safe caching (``@import "path"``).
"""

from __future__ import annotations

from ._version import __version__
from .core.engine import Dent
from .core.errors import DentError, DentIOError, ParseError, QueryError
from .core.values import Value, ValueKind, to_text

__all__ = [
    "__version__",
    "Dent",
    "DentError",
    "DentIOError",
    "ParseError",
    "QueryError",
    "Value",
    "ValueKind",
    "to_text",
]
