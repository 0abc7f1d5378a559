"""Tests for token search.

Why these tests exist:
- Every token must match some field (AND across tokens, OR across fields)
- The :exact modifier switches a field from substring to equality
- Empty queries keep every record, which callers rely on
"""

from collections import UserString

import pytest

from sortkit import FieldSpec, matches, parse_search_field, search, tokenize
from sortkit.core.search import stringify
from sortkit.core.types import UNDEFINED

NAMES = [{"name": "alpha"}, {"name": "beta"}, {"name": "ab"}, {"name": "gamma"}, {"name": "x"}]


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("name", FieldSpec("name", "")),
        ("name:exact", FieldSpec("name", "exact")),
        ("meta.zone:exact", FieldSpec("meta.zone", "exact")),
        ("a:b:c", FieldSpec("a", "b:c")),
        ("name:", FieldSpec("name", "")),
    ],
)
def test_parse_search_field(token, expected) -> None:
    assert parse_search_field(token) == expected


def test_field_spec_is_exact() -> None:
    assert FieldSpec("name", "exact").is_exact
    assert not FieldSpec("name").is_exact
    assert not FieldSpec("name", "EXACT").is_exact


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("foo", ["foo"]),
        ("  Foo, BAR  baz ", ["foo", "bar", "baz"]),
        ("a,b", ["a", "b"]),
        ("a ,, b", ["a", "b"]),
        ("a\tb", ["a", "b"]),
        ("", [""]),
        ("   ", [""]),
        (None, [""]),
    ],
)
def test_tokenize(query, expected) -> None:
    assert tokenize(query) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (UNDEFINED, ""),
        (None, ""),
        (True, "true"),
        (False, "false"),
        (8080, "8080"),
        (1.5, "1.5"),
        ("Text", "Text"),
        (UserString("Text"), "Text"),
        (["web", "db"], "web,db"),
        ([1, None, [2, 3]], "1,,2,3"),
    ],
)
def test_stringify(value, expected) -> None:
    assert stringify(value) == expected


def test_substring_match_is_case_insensitive() -> None:
    records = [{"name": "Foo Bar"}, {"name": "Baz"}]
    assert search(records, "foo", "name") == [{"name": "Foo Bar"}]
    assert search(records, "FOO", "name") == [{"name": "Foo Bar"}]


def test_exact_match() -> None:
    assert search([{"name": "Foo"}], "foo", "name:exact") == [{"name": "Foo"}]
    assert search([{"name": "Foo Bar"}], "foo", "name:exact") == []
    assert search([{"name": "Foo"}], "fo", "name:exact") == []


def test_every_token_must_match() -> None:
    assert search(NAMES, "a,b", "name") == [{"name": "beta"}, {"name": "ab"}]
    assert search(NAMES, "a m", "name") == [{"name": "gamma"}]
    assert search(NAMES, "l,t", "name") == []


def test_match_any_token() -> None:
    result = search(NAMES, "a,b", "name", match_all=False)
    assert result == [{"name": "alpha"}, {"name": "beta"}, {"name": "ab"}, {"name": "gamma"}]


def test_tokens_may_match_different_fields(hosts) -> None:
    result = search(hosts, "node active", ["name", "state"])
    assert [h["name"] for h in result] == ["node10", "node1"]


def test_fields_are_tried_in_order_mixing_modifiers(hosts) -> None:
    result = search(hosts, "a", ["meta.zone:exact", "name"])
    assert [h["name"] for h in result] == ["node2", "node1", "gateway"]


def test_empty_query_matches_everything(hosts) -> None:
    assert search(hosts, "", "name") == hosts
    assert search(hosts, None, "name") == hosts


def test_missing_fields_do_not_match(hosts) -> None:
    assert search(hosts, "gateway", "nope") == []
    assert search(hosts, "none", "state") == []


def test_non_string_fields_are_stringified() -> None:
    records = [{"port": 8080, "tags": ["web", "db"], "public": True}, {"port": 22}]
    assert search(records, "80", "port") == [records[0]]
    assert search(records, "db", "tags") == [records[0]]
    assert search(records, "true", "public:exact") == [records[0]]


def test_search_keeps_input_order_and_identity(hosts) -> None:
    result = search(hosts, "node", "name")
    assert all(r is h for r, h in zip(result, hosts[:3], strict=True))


def test_matches_single_record() -> None:
    fields = [parse_search_field("name"), parse_search_field("id:exact")]
    record = {"name": "web-frontend", "id": "42"}
    assert matches(record, ["web", "42"], fields)
    assert not matches(record, ["web", "4"], fields)
    assert matches(record, ["nope", "42"], fields, match_all=False)


def test_search_rejects_non_string_keys() -> None:
    with pytest.raises(TypeError):
        search(NAMES, "a", ["name", 3])


class Unloaded:
    @property
    def name(self) -> str:
        raise ValueError("not loaded")


def test_search_skips_failing_properties() -> None:
    records = [Unloaded(), {"name": "loaded"}]
    assert search(records, "load", "name") == [records[1]]
    assert search(records, "", "name") == records
