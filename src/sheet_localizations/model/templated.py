"""TemplatedValue: a runtime-substitutable placeholder inside a translation.

Placeholders follow the pattern ``{{key}}`` or ``{{key:Type}}`` where the key
is made of letters, digits, underscores and hyphens, and ``Type`` is one of
``DateTime``, ``String``, ``int``, ``double`` or ``num``.  Matching is
case-sensitive; braces cannot be escaped or nested, and any token outside
this grammar is plain text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from sheet_localizations.normalizer import to_camel_case

__all__ = [
    "DEFAULT_TEMPLATED_VALUE_TYPE",
    "TEMPLATED_VALUE_TYPES",
    "TemplatedValue",
    "extract_templated_values",
]

TEMPLATED_VALUE_TYPES: tuple[str, ...] = ("DateTime", "String", "int", "double", "num")
DEFAULT_TEMPLATED_VALUE_TYPE = "String"

_PATTERN = re.compile(
    r"\{\{([a-zA-Z0-9_-]+(?::(?:"
    + "|".join(TEMPLATED_VALUE_TYPES)
    + r"))?)\}\}"
)


@dataclass(frozen=True, slots=True, eq=False)
class TemplatedValue:
    """A placeholder token found in a translation.

    Two templated values are equal (and hash identically) when their keys
    match, whatever their type annotation or position.  This lets cases and
    translations compare their placeholder sets with plain set equality.

    Attributes:
        start_index: Offset of the opening ``{{`` in the translation value.
        end_index:   Offset just past the closing ``}}``.
        raw_token:   The full matched text, e.g. ``"{{count:int}}"``.
    """

    start_index: int
    end_index: int
    raw_token: str

    @property
    def _inner(self) -> str:
        return self.raw_token[2:-2]

    @property
    def key(self) -> str:
        """The key, e.g. ``first_name`` for ``{{first_name}}``."""
        return self._inner.split(":", 1)[0]

    @property
    def type(self) -> str:
        """The declared type, ``String`` when the token has no suffix."""
        parts = self._inner.split(":", 1)
        if len(parts) > 1:
            return parts[1]
        return DEFAULT_TEMPLATED_VALUE_TYPE

    @property
    def normalized_key(self) -> str:
        """The camel-cased key, e.g. ``firstName`` for ``{{first_name}}``."""
        return to_camel_case(self.key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemplatedValue):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    @classmethod
    def parse(cls, value: str) -> list[TemplatedValue]:
        """Alias of :func:`extract_templated_values`."""
        return extract_templated_values(value)


def extract_templated_values(value: str) -> list[TemplatedValue]:
    """Extract every placeholder token from ``value``.

    Args:
        value: A raw translation string.

    Returns:
        Non-overlapping matches in left-to-right order, each with its
        character span and raw token text.
    """
    return [
        TemplatedValue(match.start(), match.end(), match.group(0))
        for match in _PATTERN.finditer(value)
    ]
