"""KeyNormalizer: converts label keys and path segments to camel/pascal case.

Splits identifiers into lowercase words across these naming conventions:
- camelCase (e.g. "camelCase" -> ["camel", "case"])
- PascalCase (e.g. "PascalCase" -> ["pascal", "case"])
- snake_case, kebab-case, dotted and spaced keys

Also handles:
- Acronyms (e.g. "APIKey" -> ["api", "key"], "URLParser" -> ["url", "parser"])
- Digit boundaries (e.g. "address2" -> ["address", "2"])
- Multiple consecutive separators (e.g. "some__key" -> ["some", "key"])

The words are then joined back as ``camelCase`` or ``PascalCase`` for the
accessor names a code generator emits.
"""

from __future__ import annotations

import re

from cachetools import LRUCache

__all__ = ["KeyNormalizer", "to_camel_case", "to_pascal_case"]

# Matches separators: underscores, hyphens, dots, slashes and whitespace
_SEP = re.compile(r"[_\-./\s]+")

# Matches camelCase boundary: lowercase letter followed by uppercase letter
_UPPER_LOWER = re.compile(r"([a-z])([A-Z])")

# Matches acronym runs: sequence of uppercase letters before an uppercase+lowercase pair
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# Matches letter/digit boundaries in both directions.
# NOTE: Applied twice because each match consumes both characters, so the
# opposite boundary of an isolated digit ("2C" in "v2Config") only shows up
# after the first substitution.
_DIGIT_BOUNDARY = re.compile(r"([a-zA-Z])(\d)|(\d)([a-zA-Z])")


class KeyNormalizer:
    """Splits identifiers into words and re-joins them in camel or pascal case.

    Splitting runs a regex pipeline per key.  Keys repeat heavily across a
    localization sheet (every path segment of every row), so the word lists
    are memoized in a per-instance ``LRUCache``.  Two instances never share
    cache state.

    Example usage:
        normalizer = KeyNormalizer()
        normalizer.camel_case("first_name")    # "firstName"
        normalizer.pascal_case("home.title")   # "HomeTitle"
        normalizer.camel_case("APIKey")        # "apiKey"
    """

    def __init__(self, max_cache_size: int = 1024) -> None:
        self._cache: LRUCache[str, tuple[str, ...]] = LRUCache(maxsize=max_cache_size)

    @property
    def max_size(self) -> int:
        """The maximum number of keys whose word split is memoized."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of memoized keys."""
        return int(self._cache.currsize)

    def words(self, key: str) -> tuple[str, ...]:
        """Split a key into lowercase words.

        Processing pipeline (applied in order):
        1. Replace separators with spaces.
        2. Insert space at camelCase boundaries.
        3. Insert space at acronym runs.
        4. Insert space at digit boundaries (two passes).
        5. Lowercase everything and split on whitespace.

        Args:
            key: The raw key or path segment.

        Returns:
            Tuple of lowercase words; empty for a blank key.
        """
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        s = _SEP.sub(" ", key)
        s = _UPPER_LOWER.sub(r"\1 \2", s)
        s = _UPPER_RUN.sub(r"\1 \2", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)

        result = tuple(s.lower().split())
        self._cache[key] = result
        return result

    def camel_case(self, key: str) -> str:
        """Return ``key`` as camelCase (``"first_name"`` -> ``"firstName"``)."""
        words = self.words(key)
        if not words:
            return ""
        return words[0] + "".join(w.capitalize() for w in words[1:])

    def pascal_case(self, key: str) -> str:
        """Return ``key`` as PascalCase (``"first_name"`` -> ``"FirstName"``)."""
        return "".join(w.capitalize() for w in self.words(key))


# Module-level normalizer (pure transform, safe to share)
_normalizer = KeyNormalizer()


def to_camel_case(key: str) -> str:
    """Camel-case ``key`` with the shared module-level normalizer."""
    return _normalizer.camel_case(key)


def to_pascal_case(key: str) -> str:
    """Pascal-case ``key`` with the shared module-level normalizer."""
    return _normalizer.pascal_case(key)
