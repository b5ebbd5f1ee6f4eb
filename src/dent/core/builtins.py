"""
Built-in Dent functions: ``import`` and ``merge``.

Neither raises: malformed input is answered with ``None``.
"""

from __future__ import annotations

from dent.core.imports import ImportCache, try_load
from dent.core.registry import DentFunction
from dent.core.values import Value


def make_import(cache: ImportCache) -> DentFunction:
    """Build the ``import`` function bound to an engine's import cache.

    ``@import "path/to/file.dent"`` evaluates to the parsed contents of the
    file, or ``None`` if the argument is not a string or the import fails.
    """

    def import_(value: Value) -> Value:
        if not isinstance(value, str):
            return None
        return try_load(cache, value)

    return import_


def merge(value: Value) -> Value:
    """Merge a list of lists into one list, or a list of dicts into one dict.

    Lists are concatenated in order. Dicts are combined in order with later
    keys overwriting earlier ones. A non-list argument, an empty list, or
    elements that are not all lists or all dicts give ``None``.
    """
    if not isinstance(value, list) or not value:
        return None

    if all(isinstance(item, list) for item in value):
        merged_list: list[Value] = []
        for item in value:
            merged_list.extend(item)
        return merged_list

    if all(isinstance(item, dict) for item in value):
        merged_dict: dict[str, Value] = {}
        for item in value:
            merged_dict.update(item)
        return merged_dict

    return None


def builtin_functions(cache: ImportCache) -> dict[str, DentFunction]:
    """The built-in functions installed by ``Dent.default()``."""
    return {
        "import": make_import(cache),
        "merge": merge,
    }
