"""Tests for TemplatedValue and extract_templated_values.

Covers:
- Keys, types and character spans of extracted placeholders
- Default type ``String`` when no suffix is given
- Only the fixed type names are accepted (case-sensitive)
- Non-matching tokens are ignored
- Equality and hashing by key alone
"""

from __future__ import annotations

import pytest

from sheet_localizations.model.templated import (
    TEMPLATED_VALUE_TYPES,
    TemplatedValue,
    extract_templated_values,
)

GREETING = "Hello {{first_name}}, you have {{count:int}} items"


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


class TestExtraction:
    def test_greeting_yields_two_placeholders(self) -> None:
        values = extract_templated_values(GREETING)
        assert [(v.key, v.type) for v in values] == [
            ("first_name", "String"),
            ("count", "int"),
        ]

    def test_character_spans(self) -> None:
        first, second = extract_templated_values(GREETING)
        assert (first.start_index, first.end_index) == (6, 20)
        assert (second.start_index, second.end_index) == (31, 44)
        assert GREETING[first.start_index : first.end_index] == "{{first_name}}"
        assert GREETING[second.start_index : second.end_index] == "{{count:int}}"

    def test_raw_token_includes_braces(self) -> None:
        (value,) = extract_templated_values("Due {{date:DateTime}}")
        assert value.raw_token == "{{date:DateTime}}"

    def test_no_placeholders(self) -> None:
        assert extract_templated_values("Plain text") == []

    def test_empty_string(self) -> None:
        assert extract_templated_values("") == []

    @pytest.mark.parametrize("type_name", TEMPLATED_VALUE_TYPES)
    def test_all_supported_types(self, type_name: str) -> None:
        (value,) = extract_templated_values(f"{{{{x:{type_name}}}}}")
        assert value.type == type_name

    @pytest.mark.parametrize(
        "text",
        [
            "{{count:Int}}",
            "{{count:float}}",
            "{single}",
            "{{ spaced }}",
            "{{}}",
            "{{dotted.key}}",
        ],
    )
    def test_tokens_outside_grammar_are_ignored(self, text: str) -> None:
        assert extract_templated_values(text) == []

    def test_hyphen_and_digits_in_key(self) -> None:
        (value,) = extract_templated_values("{{user-id2}}")
        assert value.key == "user-id2"

    def test_left_to_right_order(self) -> None:
        values = extract_templated_values("{{b}} {{a}} {{c}}")
        assert [v.key for v in values] == ["b", "a", "c"]

    def test_same_key_twice_is_extracted_twice(self) -> None:
        values = extract_templated_values("{{n}} and {{n}}")
        assert len(values) == 2
        assert len(set(values)) == 1

    def test_parse_alias(self) -> None:
        assert TemplatedValue.parse(GREETING) == extract_templated_values(GREETING)


# ---------------------------------------------------------------------------
# Derived properties and identity
# ---------------------------------------------------------------------------


class TestTemplatedValue:
    def test_normalized_key_is_camel_case(self) -> None:
        assert TemplatedValue(0, 14, "{{first_name}}").normalized_key == "firstName"

    def test_equal_when_keys_match(self) -> None:
        a = TemplatedValue(0, 9, "{{count}}")
        b = TemplatedValue(20, 33, "{{count:int}}")
        assert a == b
        assert hash(a) == hash(b)

    def test_not_equal_when_keys_differ(self) -> None:
        assert TemplatedValue(0, 5, "{{a}}") != TemplatedValue(0, 5, "{{b}}")

    def test_set_semantics_use_key(self) -> None:
        left = set(extract_templated_values("{{a}} {{b:int}}"))
        right = set(extract_templated_values("{{b:double}} then {{a}}"))
        assert left == right

    def test_not_equal_to_other_types(self) -> None:
        assert TemplatedValue(0, 5, "{{a}}") != "a"
