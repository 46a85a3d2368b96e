"""Tree subpackage: the section hierarchy labels are inserted into.

Re-exports the public API for the tree module:
- Section: a node owning child sections and labels, with ``insert``
- Localizations: the root section declaring name and supported languages
"""

from sheet_localizations.tree.section import DEFAULT_SECTION_KEY, Localizations, Section

__all__ = ["DEFAULT_SECTION_KEY", "Localizations", "Section"]
