"""Tests for Dent value helpers and canonical rendering."""

from __future__ import annotations

import pytest

from dent.core.values import (
    ValueKind,
    clone,
    get,
    index,
    is_empty,
    kind_of,
    length,
    to_text,
)


class TestKinds:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (None, ValueKind.NONE),
            ("x", ValueKind.STR),
            (1, ValueKind.INT),
            (1.5, ValueKind.FLOAT),
            (True, ValueKind.BOOL),
            (False, ValueKind.BOOL),
            ([], ValueKind.LIST),
            ({}, ValueKind.DICT),
        ],
    )
    def test_kind_of(self, value, kind: ValueKind) -> None:
        assert kind_of(value) == kind

    def test_rejects_foreign_objects(self) -> None:
        with pytest.raises(TypeError):
            kind_of(object())  # type: ignore[arg-type]


class TestAccess:
    def test_missing_key_is_none(self) -> None:
        assert get({"a": 1}, "b") is None
        assert get({"a": 1}, "a") == 1

    def test_key_on_non_dict_is_none(self) -> None:
        for value in (None, "a", 1, [1]):
            assert get(value, "a") is None

    def test_key_default(self) -> None:
        assert get({}, "a", default=7) == 7

    def test_out_of_range_index_is_none(self) -> None:
        assert index([1, 2], 5) is None
        assert index([1, 2], -1) is None
        assert index([1, 2], 1) == 2

    def test_index_on_non_list_is_none(self) -> None:
        for value in (None, "abc", 1, {"0": 1}):
            assert index(value, 0) is None

    def test_index_default(self) -> None:
        assert index([], 0, default="x") == "x"

    def test_length_and_empty(self) -> None:
        assert length([1, 2]) == 2
        assert length({"a": 1}) == 1
        assert length("abc") is None
        assert is_empty([]) is True
        assert is_empty({}) is True
        assert is_empty([0]) is False
        assert is_empty(None) is False
        assert is_empty("") is False


class TestClone:
    def test_clone_is_independent(self) -> None:
        original = {"a": [1, {"b": 2}]}
        copy = clone(original)
        copy["a"][1]["b"] = 3
        copy["a"].append(4)
        assert original == {"a": [1, {"b": 2}]}

    def test_clone_scalar(self) -> None:
        assert clone("x") == "x"
        assert clone(None) is None


class TestToText:
    def test_scalars(self) -> None:
        assert to_text(None) == "none"
        assert to_text("raw text") == "raw text"
        assert to_text(35) == "35"
        assert to_text(-4) == "-4"
        assert to_text(True) == "true"
        assert to_text(False) == "false"

    def test_floats_keep_fraction(self) -> None:
        assert to_text(2.0) == "2.0"
        assert to_text(0.5) == "0.5"

    def test_lists(self) -> None:
        assert to_text([]) == "[ ]"
        assert to_text([1, "a", [None]]) == "[ 1 a [ none ] ]"

    def test_dicts(self) -> None:
        assert to_text({}) == "{ }"
        assert to_text({"a": 1}) == "{ a: 1 }"

    def test_dict_entries_as_set(self) -> None:
        text = to_text({"a": 1, "b": True, "c": "x"})
        assert text.startswith("{ ") and text.endswith(" }")
        words = text[2:-2].split(" ")
        pairs = {(words[i], words[i + 1]) for i in range(0, len(words), 2)}
        assert pairs == {("a:", "1"), ("b:", "true"), ("c:", "x")}
