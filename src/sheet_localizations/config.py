"""LocalizationsConfig: the root declaration of an application's labels.

LocalizationsConfig is a frozen (immutable) dataclass holding the name of the
generated localizations class and the ordered list of supported languages.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["DEFAULT_NAME", "LocalizationsConfig"]

DEFAULT_NAME = "AppLocalizations"


@dataclass(frozen=True, slots=True)
class LocalizationsConfig:
    """Immutable configuration for a localization tree.

    Attributes:
        supported_language_codes: Ordered language codes, e.g. ``("en", "fr")``.
            Must be non-empty, without blanks or duplicates.  Any iterable is
            accepted and stored as a tuple.
        name: Name of the root declaration.  Defaults to ``"AppLocalizations"``.
    """

    supported_language_codes: tuple[str, ...] = field(default=())
    name: str = DEFAULT_NAME

    def __post_init__(self) -> None:
        codes = _as_tuple(self.supported_language_codes)
        object.__setattr__(self, "supported_language_codes", codes)
        if not codes:
            msg = "supported_language_codes must not be empty"
            raise ValueError(msg)
        if any(not code.strip() for code in codes):
            msg = f"supported_language_codes must not contain blank codes, got {codes}"
            raise ValueError(msg)
        if len(set(codes)) != len(codes):
            msg = f"supported_language_codes must not contain duplicates, got {codes}"
            raise ValueError(msg)
        if not self.name.strip():
            msg = "name must not be blank"
            raise ValueError(msg)


def _as_tuple(codes: Iterable[str]) -> tuple[str, ...]:
    if isinstance(codes, str):
        # a bare "en" would otherwise become ("e", "n")
        return (codes,)
    return tuple(codes)
