"""Case and Label: the per-key data model of a localization tree.

A label is one localizable string identity.  It holds one or more cases,
each selected by a condition and bundling the translations for every
supported language.

Label invariants, checked on construction and after every ``add_case``:
- at most one case has the default condition;
- all category conditions share a single category name;
- every case exposes the same set of placeholder keys.

Cases check on construction that all their translations agree on
placeholder keys.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from sheet_localizations.errors import (
    DuplicateDefaultCaseError,
    MixedCategoryError,
    PlaceholderMismatchError,
)
from sheet_localizations.model.condition import Category, Condition
from sheet_localizations.model.templated import TemplatedValue
from sheet_localizations.model.translation import Translation
from sheet_localizations.normalizer import to_camel_case

__all__ = ["Case", "Label"]

log = logging.getLogger(__name__)


def _keys(templated_values: Iterable[TemplatedValue]) -> frozenset[str]:
    return frozenset(t.key for t in templated_values)


@dataclass(slots=True)
class Case:
    """A label variant that applies under ``condition``.

    Attributes:
        condition:    Selector of this case.
        translations: One translation per supported language, in sheet order.
        label_key:    Key of the label the case is built for, if known.
        label_path:   Dotted path of that label, if known.

    Raises:
        PlaceholderMismatchError: If the translations disagree on placeholders.
    """

    condition: Condition
    translations: list[Translation] = field(default_factory=list)
    label_key: str = field(default="", compare=False)
    label_path: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        self.translations = list(self.translations)
        if len(self.translations) > 1:
            first = self.translations[0]
            expected = first.templated_keys
            for current in self.translations[1:]:
                if current.templated_keys != expected:
                    where = f"translation `{current.language_code}` of case `{self.condition}`"
                    if self.label_path:
                        where = f"{where} at `{self.label_path}`"
                    raise PlaceholderMismatchError(
                        self.label_key,
                        where,
                        expected,
                        current.templated_keys,
                    )

    @property
    def templated_values(self) -> list[TemplatedValue]:
        """Placeholders of the first translation, empty without translations."""
        if not self.translations:
            return []
        return self.translations[0].templated_values

    @property
    def language_codes(self) -> list[str]:
        return [t.language_code for t in self.translations]

    def translation_for(self, language_code: str) -> Translation | None:
        for translation in self.translations:
            if translation.language_code == language_code:
                return translation
        return None


class Label:
    """A localizable string with one or more conditional cases.

    Example::

        label = Label("itemCount", [
            Case(Condition.parse("plural.one"), [Translation("en", "One item")]),
            Case(Condition.parse("plural.other"), [Translation("en", "{{n:int}} items")]),
        ])

    The second case above fails validation: its placeholders differ from the
    first case's.
    """

    __slots__ = ("cases", "key")

    def __init__(self, key: str, cases: Sequence[Case]) -> None:
        if not cases:
            msg = f"Label `{key}` needs at least one case"
            raise ValueError(msg)
        self.key = key
        self.cases: list[Case] = list(cases)
        self._check_cases()

    def __repr__(self) -> str:
        return f"Label(key={self.key!r}, cases={len(self.cases)})"

    @property
    def normalized_key(self) -> str:
        return to_camel_case(self.key)

    @property
    def templated_values(self) -> list[TemplatedValue]:
        """The placeholder set of this label (its first case's placeholders)."""
        return self.cases[0].templated_values

    @property
    def category(self) -> Category | None:
        """The category this label varies over, or None without category cases.

        Named after the first category condition; holds the values of every
        category condition of the label.
        """
        conditions = [c.condition for c in self.cases if c.condition.is_category]
        if not conditions:
            return None
        return Category(conditions[0].category, {c.value for c in conditions})

    @property
    def default_case(self) -> Case | None:
        for case in self.cases:
            if case.condition.is_default:
                return case
        return None

    def case_for(self, value: str) -> Case | None:
        """Return the category case whose (camel-cased) value is ``value``."""
        value = to_camel_case(value)
        for case in self.cases:
            if case.condition.is_category and case.condition.value == value:
                return case
        return None

    def add_case(self, case: Case) -> None:
        """Append ``case`` and re-check the label.

        The case stays appended when the check fails; the error is meant to
        abort the whole build.
        """
        self.cases.append(case)
        log.debug("Label `%s`: added case `%s`", self.key, case.condition)
        self._check_cases()

    def _check_cases(self) -> None:
        defaults = sum(1 for c in self.cases if c.condition.is_default)
        if defaults > 1:
            raise DuplicateDefaultCaseError(self.key, defaults)

        categories: list[str] = []
        for case in self.cases:
            name = case.condition.category
            if case.condition.is_category and name not in categories:
                categories.append(name)
        if len(categories) > 1:
            raise MixedCategoryError(self.key, categories)

        expected = _keys(self.cases[0].templated_values)
        for case in self.cases[1:]:
            actual = _keys(case.templated_values)
            if actual != expected:
                raise PlaceholderMismatchError(
                    self.key, f"case `{case.condition}`", expected, actual
                )
