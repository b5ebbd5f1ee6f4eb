"""
Path queries over parsed Dent values.

A query such as ``.servers[0].host`` is split on ``.``; each segment is a
dictionary key, optionally followed by one or more ``[index]`` suffixes.
Missing keys and indices resolve to ``None`` rather than failing.
"""

from __future__ import annotations

import re

from dent.core.errors import QueryError
from dent.core.values import Value, get, index

QueryPart = str | int

_SEGMENT_RE = re.compile(r"^(?P<key>[^\[\]]*)(?P<indices>(?:\[[^\[\]]*\])*)$")
_INDEX_RE = re.compile(r"\[([^\[\]]*)\]")


def parse_query(query: str) -> list[QueryPart]:
    """Split a query into keys (``str``) and list indices (``int``).

    Raises:
        QueryError: If a segment has unbalanced brackets or a non-numeric index.
    """
    parts: list[QueryPart] = []
    for segment in query.split("."):
        if not segment:
            continue
        m = _SEGMENT_RE.match(segment)
        if m is None:
            raise QueryError(f"Malformed query segment: {segment!r}")
        key = m.group("key")
        if key:
            parts.append(key)
        for raw in _INDEX_RE.findall(m.group("indices")):
            raw = raw.strip()
            if not (raw.isascii() and raw.isdigit()):
                raise QueryError(f"Invalid list index {raw!r} in segment {segment!r}")
            parts.append(int(raw))
    return parts


def resolve(value: Value, query: str | list[QueryPart]) -> Value:
    """Walk ``value`` along a query, returning ``None`` at the first miss."""
    parts = parse_query(query) if isinstance(query, str) else query
    current = value
    for part in parts:
        if isinstance(part, int):
            current = index(current, part)
        else:
            current = get(current, part)
    return current
