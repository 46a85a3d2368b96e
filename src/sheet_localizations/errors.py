"""Exception hierarchy for localization tree construction.

Every error is raised at the insertion that introduces the problem and is
never caught inside the package.  Downstream code generation assumes a
consistent model, so callers should abort the run on any of these.
"""

from __future__ import annotations

__all__ = [
    "ConditionFormatError",
    "DuplicateDefaultCaseError",
    "InvalidPathError",
    "LabelValidationError",
    "LocalizationError",
    "MixedCategoryError",
    "PlaceholderMismatchError",
]


class LocalizationError(Exception):
    """Base class for all errors raised while building a localization tree."""


class InvalidPathError(LocalizationError, ValueError):
    """A label path is blank or contains an empty segment."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid label path {path!r}: {reason}")


class ConditionFormatError(LocalizationError, ValueError):
    """Condition text does not follow the ``<category>.<value>`` grammar."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        msg = (
            f"Category condition should be composed of two segments "
            f"`<category>.<value>`, got {text!r}"
        )
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class LabelValidationError(LocalizationError):
    """A label's cases violate one of the label-level invariants."""

    def __init__(self, label_key: str, message: str) -> None:
        self.label_key = label_key
        super().__init__(message)


class DuplicateDefaultCaseError(LabelValidationError):
    """More than one case of a label has the default condition."""

    def __init__(self, label_key: str, count: int) -> None:
        self.count = count
        super().__init__(
            label_key,
            f"There is more than one default case ({count}) "
            f"for label with key `{label_key}`",
        )


class MixedCategoryError(LabelValidationError):
    """The category cases of a label do not share one category name."""

    def __init__(self, label_key: str, categories: list[str]) -> None:
        self.categories = categories
        names = ", ".join(f"`{c}`" for c in categories)
        super().__init__(
            label_key,
            f"There is more than one category in conditions for label "
            f"`{label_key}`: {names}",
        )


class PlaceholderMismatchError(LabelValidationError):
    """Translations or cases of a label disagree on their placeholder keys.

    Attributes:
        label_key: Key of the label, or ``""`` when the mismatch is detected
            while building a standalone case.
        where:     Human readable location of the offending translation/case.
        expected:  Placeholder keys of the reference translation/case.
        actual:    Placeholder keys of the offending translation/case.
    """

    def __init__(
        self,
        label_key: str,
        where: str,
        expected: frozenset[str],
        actual: frozenset[str],
    ) -> None:
        self.where = where
        self.expected = expected
        self.actual = actual
        if label_key:
            subject = f"All translations and cases of label `{label_key}`"
        else:
            subject = "All translations of a case"
        super().__init__(
            label_key,
            f"{subject} should have the same "
            f"templated values; {where} has {sorted(actual)}, "
            f"expected {sorted(expected)}",
        )
