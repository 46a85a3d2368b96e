"""sheet-localizations - localization label trees for typed accessor generation."""

from __future__ import annotations

from sheet_localizations.api import LabelRow, build_localizations
from sheet_localizations.config import LocalizationsConfig
from sheet_localizations.errors import (
    ConditionFormatError,
    DuplicateDefaultCaseError,
    InvalidPathError,
    LabelValidationError,
    LocalizationError,
    MixedCategoryError,
    PlaceholderMismatchError,
)
from sheet_localizations.model import (
    Case,
    Category,
    Condition,
    ConditionKind,
    Label,
    TemplatedValue,
    Translation,
    extract_templated_values,
)
from sheet_localizations.normalizer import to_camel_case, to_pascal_case
from sheet_localizations.tree import Localizations, Section

__version__: str = "0.1.0"
__all__: list[str] = [
    "Case",
    "Category",
    "Condition",
    "ConditionFormatError",
    "ConditionKind",
    "DuplicateDefaultCaseError",
    "InvalidPathError",
    "Label",
    "LabelRow",
    "LabelValidationError",
    "LocalizationError",
    "Localizations",
    "LocalizationsConfig",
    "MixedCategoryError",
    "PlaceholderMismatchError",
    "Section",
    "TemplatedValue",
    "Translation",
    "build_localizations",
    "extract_templated_values",
    "to_camel_case",
    "to_pascal_case",
]
