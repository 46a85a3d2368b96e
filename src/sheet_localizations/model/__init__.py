"""Model subpackage: the per-key data of a localization tree.

Re-exports the public API for the model module:
- TemplatedValue / extract_templated_values: placeholder tokens in translations
- Translation: a label case's value in one language
- Condition / ConditionKind: DEFAULT or CATEGORY case selector
- Category: a named axis of variation with its observed values
- Case / Label: conditional variants grouped under one key
"""

from sheet_localizations.model.condition import Category, Condition, ConditionKind
from sheet_localizations.model.label import Case, Label
from sheet_localizations.model.templated import (
    TEMPLATED_VALUE_TYPES,
    TemplatedValue,
    extract_templated_values,
)
from sheet_localizations.model.translation import Translation

__all__ = [
    "TEMPLATED_VALUE_TYPES",
    "Case",
    "Category",
    "Condition",
    "ConditionKind",
    "Label",
    "TemplatedValue",
    "Translation",
    "extract_templated_values",
]
