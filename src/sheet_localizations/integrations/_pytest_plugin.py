"""pytest plugin for sheet-localizations.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), code generators built
on top of this package get the ``localizations_factory`` fixture without any
conftest.py changes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from sheet_localizations import LabelRow, Localizations, LocalizationsConfig, build_localizations


@pytest.fixture(scope="session")
def localizations_factory() -> Any:
    """Fixture that returns a callable building a tree from compact rows.

    The fixture is session-scoped because the returned callable is stateless
    (every call builds a fresh ``Localizations``).

    Usage in tests::

        def test_home_title(localizations_factory):
            root = localizations_factory([("home.title", [("en", "Home")])])
            assert root.all_labels[0].key == "title"

    Returns:
        A callable ``_build(rows, supported_language_codes=("en",), name=...)``.
        Each row is either a ``LabelRow`` or a ``(path, translations)`` /
        ``(path, translations, condition)`` tuple.
    """

    def _build(
        rows: Iterable[LabelRow | tuple[Any, ...]],
        supported_language_codes: Iterable[str] = ("en",),
        name: str = "AppLocalizations",
    ) -> Localizations:
        records = [row if isinstance(row, LabelRow) else LabelRow(*row) for row in rows]
        config = LocalizationsConfig(
            supported_language_codes=tuple(supported_language_codes), name=name
        )
        return build_localizations(records, config)

    return _build
