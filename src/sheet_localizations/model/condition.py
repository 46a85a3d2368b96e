"""Condition and Category: the selectors that distinguish the cases of a label.

A condition is a closed tagged variant: either DEFAULT (no payload) or
CATEGORY (a category name and one of its values, e.g. ``plural.one``).
Categories accumulate the distinct values observed for a name across a
label or a whole section.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto

from sheet_localizations.errors import ConditionFormatError
from sheet_localizations.normalizer import to_camel_case, to_pascal_case

__all__ = ["Category", "Condition", "ConditionKind"]


class ConditionKind(StrEnum):
    """The two kinds of case condition.

    - DEFAULT  -> "default"  : the case used when no category value applies
    - CATEGORY -> "category" : the case for one value of a category
    """

    DEFAULT = auto()
    CATEGORY = auto()


@dataclass(frozen=True, slots=True)
class Condition:
    """Immutable case selector.

    Attributes:
        kind:     DEFAULT or CATEGORY.
        category: Category name for CATEGORY conditions; empty for DEFAULT.
        value:    Camel-cased category value for CATEGORY; empty for DEFAULT.
    """

    kind: ConditionKind = ConditionKind.DEFAULT
    category: str = ""
    value: str = ""

    def __post_init__(self) -> None:
        if self.kind is ConditionKind.DEFAULT:
            if self.category or self.value:
                msg = "A default condition carries no category or value"
                raise ValueError(msg)
        elif not self.category or not self.value:
            msg = (
                "A category condition needs a category and a value, "
                f"got category={self.category!r} value={self.value!r}"
            )
            raise ValueError(msg)

    @property
    def is_default(self) -> bool:
        return self.kind is ConditionKind.DEFAULT

    @property
    def is_category(self) -> bool:
        return self.kind is ConditionKind.CATEGORY

    @classmethod
    def default(cls) -> Condition:
        return cls(ConditionKind.DEFAULT)

    @classmethod
    def category_value(cls, category: str, value: str) -> Condition:
        """Build a CATEGORY condition; ``value`` is camel-cased.

        Raises:
            ConditionFormatError: If the category or the camel-cased value is empty.
        """
        converted = to_camel_case(value)
        if not category.strip() or not converted:
            raise ConditionFormatError(f"{category}.{value}", "empty category or value")
        return cls(ConditionKind.CATEGORY, category.strip(), converted)

    @classmethod
    def parse(cls, text: str | None) -> Condition:
        """Parse condition text as found between the parentheses of a path.

        ``None`` or blank text gives the default condition.  Anything else
        must be ``<category>.<value>`` with exactly one dot.

        Raises:
            ConditionFormatError: On zero or several dots, or an empty part.
        """
        if text is None:
            return cls.default()
        stripped = text.strip()
        if not stripped:
            return cls.default()

        splits = stripped.split(".")
        if len(splits) != 2:
            raise ConditionFormatError(text, f"found {len(splits) - 1} '.' separators")
        category, value = (s.strip() for s in splits)
        if not category or not value:
            raise ConditionFormatError(text, "empty category or value")
        converted = to_camel_case(value)
        if not converted:
            raise ConditionFormatError(text, "value has no identifier characters")
        return cls(ConditionKind.CATEGORY, category, converted)

    def __str__(self) -> str:
        if self.is_default:
            return "default"
        return f"{self.category}.{self.value}"


@dataclass(slots=True)
class Category:
    """A named axis of variation and the values it takes.

    Two categories are the same category when their names match; merging
    unions their values.

    Attributes:
        name:   Category name, e.g. ``"plural"`` or ``"gender"``.
        values: Distinct values observed for this category.
    """

    name: str
    values: set[str] = field(default_factory=set, compare=False)

    @property
    def normalized_key(self) -> str:
        return to_pascal_case(self.name)

    def merge(self, other: Category) -> None:
        """Add the values of ``other`` (same name) to this category."""
        if other.name != self.name:
            msg = f"Cannot merge category {other.name!r} into {self.name!r}"
            raise ValueError(msg)
        self.values.update(other.values)
