"""Public API for building a localization tree from raw rows.

A source reader (spreadsheet, CSV, ...) produces one ``LabelRow`` per sheet
row; ``build_localizations`` turns the rows into a ``Localizations`` tree by
inserting them in order.  Each call builds a fresh tree, so there is no
global state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from sheet_localizations.config import LocalizationsConfig
from sheet_localizations.model.translation import Translation
from sheet_localizations.tree.section import Localizations

__all__ = ["LabelRow", "build_localizations"]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LabelRow:
    """One input record.

    Attributes:
        path:         Dotted label path, optionally suffixed with ``(category.value)``.
        translations: ``(language_code, value)`` pairs in sheet column order.
        condition:    Explicit condition text; None to use the path suffix.
    """

    path: str
    translations: Sequence[tuple[str, str]] = field(default=())
    condition: str | None = None

    def to_translations(self) -> list[Translation]:
        return [Translation.from_pair(pair) for pair in self.translations]


def build_localizations(
    rows: Iterable[LabelRow],
    config: LocalizationsConfig | None = None,
    *,
    supported_language_codes: Iterable[str] | None = None,
) -> Localizations:
    """Build a localization tree from ``rows``.

    Args:
        rows:   Input records, inserted in order.
        config: Root declaration.  When None, one is built from
                ``supported_language_codes``.
        supported_language_codes: Shortcut for ``LocalizationsConfig(codes)``;
                ignored when ``config`` is given.

    Returns:
        The populated ``Localizations`` root.

    Raises:
        ValueError: If neither a config nor language codes are given.
        LocalizationError: On the first row that breaks the model; the
            partially built tree is discarded.
    """
    if config is None:
        if supported_language_codes is None:
            msg = "Either config or supported_language_codes is required"
            raise ValueError(msg)
        config = LocalizationsConfig(supported_language_codes=tuple(supported_language_codes))

    root = Localizations.from_config(config)
    supported = set(config.supported_language_codes)
    count = 0
    for row in rows:
        translations = row.to_translations()
        unknown = [t.language_code for t in translations if t.language_code not in supported]
        if unknown:
            log.warning(
                "Row %r has translations for unsupported languages: %s",
                row.path,
                ", ".join(unknown),
            )
        root.insert(row.path, row.condition, translations)
        count += 1

    log.debug("Built %s from %d rows (%d labels)", config.name, count, len(root.all_labels))
    return root
