"""Tests for KeyNormalizer and the camel/pascal casing helpers.

Verifies:
- Word splitting across camelCase, PascalCase, snake_case, kebab-case, dotted keys
- Acronyms and digit boundaries
- camel_case / pascal_case joining
- Per-instance LRU memoization of word splits
"""

from __future__ import annotations

import pytest

from sheet_localizations.normalizer import KeyNormalizer, to_camel_case, to_pascal_case


@pytest.fixture
def normalizer() -> KeyNormalizer:
    """Provide a fresh KeyNormalizer instance for each test."""
    return KeyNormalizer()


class TestWords:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("camelCase", ("camel", "case")),
            ("PascalCase", ("pascal", "case")),
            ("snake_case", ("snake", "case")),
            ("kebab-case", ("kebab", "case")),
            ("dotted.key", ("dotted", "key")),
            ("two words", ("two", "words")),
            ("APIKey", ("api", "key")),
            ("URLParser", ("url", "parser")),
            ("address2", ("address", "2")),
            ("v2Config", ("v", "2", "config")),
            ("some__key", ("some", "key")),
            ("FEMALE", ("female",)),
        ],
    )
    def test_split(self, normalizer: KeyNormalizer, key: str, expected: tuple[str, ...]) -> None:
        assert normalizer.words(key) == expected

    @pytest.mark.parametrize("key", ["", "   ", "__", "-"])
    def test_blank_keys(self, normalizer: KeyNormalizer, key: str) -> None:
        assert normalizer.words(key) == ()


class TestCasing:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("first_name", "firstName"),
            ("FirstName", "firstName"),
            ("firstName", "firstName"),
            ("one", "one"),
            ("APIKey", "apiKey"),
            ("user-id", "userId"),
            ("", ""),
        ],
    )
    def test_camel_case(self, normalizer: KeyNormalizer, key: str, expected: str) -> None:
        assert normalizer.camel_case(key) == expected

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("first_name", "FirstName"),
            ("home", "Home"),
            ("AppLocalizations", "AppLocalizations"),
            ("Labels", "Labels"),
            ("", ""),
        ],
    )
    def test_pascal_case(self, normalizer: KeyNormalizer, key: str, expected: str) -> None:
        assert normalizer.pascal_case(key) == expected

    def test_module_helpers(self) -> None:
        assert to_camel_case("page_title") == "pageTitle"
        assert to_pascal_case("page_title") == "PageTitle"


class TestCache:
    def test_max_size(self) -> None:
        assert KeyNormalizer(max_cache_size=8).max_size == 8

    def test_repeated_key_is_cached_once(self, normalizer: KeyNormalizer) -> None:
        normalizer.camel_case("first_name")
        normalizer.pascal_case("first_name")
        normalizer.words("first_name")
        assert normalizer.curr_size == 1

    def test_lru_eviction(self) -> None:
        normalizer = KeyNormalizer(max_cache_size=2)
        for key in ("a", "b", "c"):
            normalizer.words(key)
        assert normalizer.curr_size == 2

    def test_instances_do_not_share_cache(self) -> None:
        a = KeyNormalizer()
        b = KeyNormalizer()
        a.words("shared_key")
        assert a.curr_size == 1
        assert b.curr_size == 0

    def test_cached_result_is_stable(self, normalizer: KeyNormalizer) -> None:
        assert normalizer.words("someKey") is normalizer.words("someKey")
