"""Translation: the value of a label case in one language."""

from __future__ import annotations

from dataclasses import dataclass, field

from sheet_localizations.model.templated import TemplatedValue, extract_templated_values

__all__ = ["Translation"]


@dataclass(frozen=True, slots=True)
class Translation:
    """A translation of a label case in a given language.

    The owning case is not referenced; a translation belongs to the case whose
    ``translations`` sequence contains it.

    Attributes:
        language_code:    Language code, e.g. ``"en"`` or ``"fr"``.
        value:            The raw translated string.
        templated_values: Placeholders found in ``value``, derived at construction.
    """

    language_code: str
    value: str
    templated_values: list[TemplatedValue] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "templated_values", extract_templated_values(self.value))

    @property
    def templated_keys(self) -> frozenset[str]:
        """The set of placeholder keys in this translation."""
        return frozenset(t.key for t in self.templated_values)

    @classmethod
    def from_pair(cls, pair: tuple[str, str]) -> Translation:
        """Build a translation from a ``(language_code, value)`` pair."""
        language_code, value = pair
        return cls(language_code, value)
