"""Section and Localizations: the hierarchical container of labels.

A section groups labels under a path segment to make them easier to find.
Rows are inserted one at a time with dotted paths such as
``home.header.title`` or ``cart.items(plural.one)``:

- every segment but the last selects (or creates) a child section;
- the last segment selects (or creates) a label, which receives a new case
  built from the row's condition and translations.

Section paths are lists of segments from the root to the section:
- The root ``Localizations`` has path ``[name, "Labels"]``.
- Each child appends its own key to its parent's path.

Derived views (``all_labels``, ``categories``) recompute on every access so
they always reflect the current tree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sheet_localizations.config import DEFAULT_NAME, LocalizationsConfig
from sheet_localizations.errors import ConditionFormatError, InvalidPathError
from sheet_localizations.model.condition import Category, Condition
from sheet_localizations.model.label import Case, Label
from sheet_localizations.model.translation import Translation
from sheet_localizations.normalizer import to_camel_case, to_pascal_case

__all__ = ["DEFAULT_SECTION_KEY", "Localizations", "Section"]

log = logging.getLogger(__name__)

DEFAULT_SECTION_KEY = "labels"


def split_condition(path: str) -> tuple[str, str | None]:
    """Split ``prefix(condition)`` into ``("prefix", "condition")``.

    Uses the first ``(`` and the first ``)``.  Without both parentheses the
    whole text is the path and the condition is None.

    Raises:
        ConditionFormatError: If ``)`` comes before ``(``.
    """
    start = path.find("(")
    end = path.find(")")
    if start < 0 or end < 0:
        return path, None
    if end < start:
        raise ConditionFormatError(path, "')' found before '('")
    return path[:start], path[start + 1 : end]


def _check_unique_keys(path: Sequence[str], kind: str, keys: list[str]) -> None:
    seen: set[str] = set()
    for key in keys:
        if key in seen:
            msg = f"Duplicate {kind} key {key!r} in section {'.'.join(path)!r}"
            raise ValueError(msg)
        seen.add(key)


class Section:
    """A node of the label tree owning child sections and direct labels.

    Attributes:
        path:     Segments from the root to this section, inclusive.
        key:      This section's own segment; ``"labels"`` for synthetic roots.
        labels:   Labels inserted directly under this section, unique by key.
        children: Child sections, unique by key, in creation order.
    """

    def __init__(
        self,
        path: Sequence[str],
        key: str | None = None,
        labels: Iterable[Label] | None = None,
        children: Iterable[Section] | None = None,
    ) -> None:
        self.path: list[str] = list(path)
        self.key: str = key if key is not None else DEFAULT_SECTION_KEY
        self.labels: list[Label] = list(labels) if labels is not None else []
        self.children: list[Section] = list(children) if children is not None else []
        _check_unique_keys(self.path, "label", [label.key for label in self.labels])
        _check_unique_keys(self.path, "section", [child.key for child in self.children])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self.path!r}, "
            f"labels={len(self.labels)}, children={len(self.children)})"
        )

    # ------------------------------------------------------------------
    # Normalized names
    # ------------------------------------------------------------------

    @property
    def normalized_key(self) -> str:
        return to_camel_case(self.key)

    @property
    def normalized_name(self) -> str:
        """Pascal-cased path segments joined with ``_``, e.g. ``App_Labels_Home``."""
        return "_".join(to_pascal_case(segment) for segment in self.path)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def all_labels(self) -> list[Label]:
        """Every label of this section, then of each child in order, recursively."""
        result = list(self.labels)
        for child in self.children:
            result.extend(child.all_labels)
        return result

    @property
    def categories(self) -> list[Category]:
        """Categories of all labels, merged by name in first-occurrence order."""
        result: dict[str, Category] = {}
        for label in self.all_labels:
            category = label.category
            if category is None:
                continue
            existing = result.get(category.name)
            if existing is None:
                result[category.name] = category
            else:
                existing.merge(category)
        return list(result.values())

    def find_child(self, key: str) -> Section | None:
        for child in self.children:
            if child.key == key:
                return child
        return None

    def find_label(self, key: str) -> Label | None:
        for label in self.labels:
            if label.key == key:
                return label
        return None

    def find_section(self, dotted_path: str) -> Section | None:
        """Return the descendant section at ``dotted_path`` (e.g. ``"home.header"``)."""
        section: Section | None = self
        for segment in dotted_path.split("."):
            if section is None:
                return None
            section = section.find_child(segment.strip())
        return section

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert(
        self,
        path: str,
        condition_text: str | None = None,
        translations: Sequence[Translation] = (),
    ) -> None:
        """Insert one row into the tree.

        Args:
            path:           Dotted label path, optionally suffixed with
                            ``(category.value)``.
            condition_text: Condition of the row.  When None or blank, the
                            condition suffix of ``path`` (if any) is used.
            translations:   Translations of the row, one per language.

        Raises:
            InvalidPathError:     Blank path or empty segment.
            ConditionFormatError: Malformed condition, or conflicting
                                  conditions in ``path`` and ``condition_text``.
            LabelValidationError: The new case breaks a label invariant.
        """
        stripped = path.strip()
        if not stripped:
            raise InvalidPathError(path, "path is empty")

        prefix, suffix = split_condition(stripped)
        if suffix is not None and not suffix.strip():
            suffix = None
        if condition_text is not None and not condition_text.strip():
            condition_text = None
        if suffix is not None:
            if condition_text is not None and condition_text.strip() != suffix.strip():
                raise ConditionFormatError(
                    condition_text,
                    f"conflicts with condition `{suffix}` in path {path!r}",
                )
            condition_text = suffix

        segments = [segment.strip() for segment in prefix.split(".")]
        if any(not segment for segment in segments):
            raise InvalidPathError(path, "path contains an empty segment")

        condition = Condition.parse(condition_text)
        case = Case(
            condition,
            list(translations),
            label_key=segments[-1],
            label_path=".".join(segments),
        )
        self._insert(segments, case)

    def _insert(self, segments: list[str], case: Case) -> None:
        key = segments[0]
        if len(segments) == 1:
            label = self.find_label(key)
            if label is not None:
                label.add_case(case)
            else:
                self.labels.append(Label(key, [case]))
                log.debug("Created label %s", ".".join([*self.path, key]))
            return

        child = self.find_child(key)
        if child is None:
            child = self._create_child(key)
        child._insert(segments[1:], case)

    def _create_child(self, key: str) -> Section:
        child = Section(path=[*self.path, key], key=key)
        self.children.append(child)
        log.debug("Created section %s", ".".join(child.path))
        return child


class Localizations(Section):
    """Root section of an application's labels.

    Fixes its path to ``[name, "Labels"]`` and carries the ordered list of
    supported language codes.

    Example::

        root = Localizations(supported_language_codes=["en", "fr"])
        root.insert("home.title", None, [Translation("en", "Home"), Translation("fr", "Accueil")])
        root.find_section("home").normalized_name   # "AppLocalizations_Labels_Home"
    """

    def __init__(
        self,
        supported_language_codes: Iterable[str],
        name: str = DEFAULT_NAME,
        labels: Iterable[Label] | None = None,
        children: Iterable[Section] | None = None,
    ) -> None:
        self._config = LocalizationsConfig(
            supported_language_codes=tuple(supported_language_codes), name=name
        )
        super().__init__(path=[name, "Labels"], key=None, labels=labels, children=children)

    @classmethod
    def from_config(cls, config: LocalizationsConfig) -> Localizations:
        return cls(config.supported_language_codes, name=config.name)

    @property
    def config(self) -> LocalizationsConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def supported_language_codes(self) -> list[str]:
        return list(self._config.supported_language_codes)

    def copy_with(
        self,
        supported_language_codes: Iterable[str] | None = None,
        labels: Iterable[Label] | None = None,
        children: Iterable[Section] | None = None,
        name: str | None = None,
    ) -> Localizations:
        """Return a new root, replacing only the given parts.

        Labels and child sections that are not replaced are shared with this
        root, not copied.
        """
        return Localizations(
            supported_language_codes=(
                supported_language_codes
                if supported_language_codes is not None
                else self._config.supported_language_codes
            ),
            name=name if name is not None else self.name,
            labels=labels if labels is not None else self.labels,
            children=children if children is not None else self.children,
        )
