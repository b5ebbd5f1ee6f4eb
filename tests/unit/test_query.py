"""Tests for dotted/bracket path queries."""

from __future__ import annotations

import pytest

from dent import Dent
from dent.core.errors import QueryError
from dent.core.query import parse_query, resolve


@pytest.fixture
def document(bare_dent: Dent):
    return bare_dent.parse(
        """
        {
          foo: { bar: [ { baz: 42 } { baz: 43 } ] }
          matrix: [ [ 1 2 ] [ 3 4 ] ]
          name: Mario
        }
        """
    )


class TestParseQuery:
    def test_keys_and_indices(self) -> None:
        assert parse_query(".foo.bar[0].baz") == ["foo", "bar", 0, "baz"]

    def test_leading_dot_optional(self) -> None:
        assert parse_query("foo.bar") == ["foo", "bar"]

    def test_empty_query_is_root(self) -> None:
        assert parse_query("") == []
        assert parse_query(".") == []

    def test_bare_index(self) -> None:
        assert parse_query("[2]") == [2]
        assert parse_query(".[0][1]") == [0, 1]

    def test_multiple_indices(self) -> None:
        assert parse_query(".matrix[1][0]") == ["matrix", 1, 0]

    @pytest.mark.parametrize("query", [".foo[x]", ".foo[-1]", ".foo[", ".foo]0[", ".a[0]b"])
    def test_malformed(self, query: str) -> None:
        with pytest.raises(QueryError):
            parse_query(query)


class TestResolve:
    def test_nested_lookup(self, document) -> None:
        assert resolve(document, ".foo.bar[0].baz") == 42
        assert resolve(document, ".foo.bar[1].baz") == 43
        assert resolve(document, ".matrix[1][0]") == 3

    def test_root(self, document) -> None:
        assert resolve(document, "") == document

    def test_missing_key_is_none(self, document) -> None:
        assert resolve(document, ".nope") is None
        assert resolve(document, ".nope.deeper[3].x") is None

    def test_out_of_range_is_none(self, document) -> None:
        assert resolve(document, ".foo.bar[9].baz") is None

    def test_wrong_kind_is_none(self, document) -> None:
        assert resolve(document, ".name.first") is None
        assert resolve(document, ".name[0]") is None
        assert resolve(document, ".foo[0]") is None

    def test_pre_split_parts(self, document) -> None:
        assert resolve(document, ["foo", "bar", 0, "baz"]) == 42
