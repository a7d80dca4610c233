"""
edgefonts – catalog_index.py
============================

In-memory index over the web font catalog.

The raw catalog is a list of family records as returned by the ``families``
API::

    {
        "name": "Droid Sans",
        "slug": "droid-sans",
        "classifications": ["sans-serif"],
        "fvds": ["n4", "n7"],
        "subset": "default",
    }

Design principles
-----------------
- **All-or-nothing**: a build either replaces every structure or none.
- **Alphabetical first**: ``all_fonts`` is sorted once, every derived list
  inherits that order.
- **Read-only between builds**: lookups never mutate the index.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, NamedTuple

logger = logging.getLogger(__name__)

# ============================================================
# Classification tags
# ============================================================

#: Closed set of design classifications, in display order.
FONT_CLASSIFICATIONS: tuple[str, ...] = (
    "serif",
    "sans-serif",
    "slab-serif",
    "script",
    "blackletter",
    "monospaced",
    "handmade",
    "decorative",
)

DEFAULT_SUBSET = "default"


class DataError(ValueError):
    """Raised when raw catalog data is not a well-formed list of families."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors: list[str] = list(errors or [])


def fold_case(text: str) -> str:
    """Case fold used for both indexed names and search needles."""
    return text.lower()


# ============================================================
# Font family record
# ============================================================


@dataclass(frozen=True)
class FontFamily:
    name: str
    slug: str
    classifications: tuple[str, ...] = ()
    fvds: tuple[str, ...] = ()
    subset: str = DEFAULT_SUBSET
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)
    lower_case_name: str = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lower_case_name", fold_case(self.name))

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | FontFamily) -> FontFamily:
        """
        Build a family from a raw API record.

        The record must already have passed :func:`validate_family_entry`.
        Fields other than the known ones are kept in ``extra``.
        """
        if isinstance(record, FontFamily):
            return record
        known = {"name", "slug", "classifications", "fvds", "subset", "lowerCaseName"}
        subset = record.get("subset")
        return cls(
            name=record["name"],
            slug=record["slug"],
            classifications=tuple(record.get("classifications") or ()),
            fvds=tuple(record.get("fvds") or ()),
            subset=DEFAULT_SUBSET if subset is None else subset,
            extra={k: v for k, v in record.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "name": self.name,
            "slug": self.slug,
            "classifications": list(self.classifications),
            "fvds": list(self.fvds),
            "subset": self.subset,
        }


# ============================================================
# Validation
# ============================================================


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list | tuple) and all(isinstance(v, str) for v in value)


def validate_family_entry(entry: Any, index: int) -> list[str]:
    """
    Check a single raw family record.

    Args:
        entry: The raw record (normally a dict decoded from JSON).
        index: Position of the record in the catalog, used in messages.

    Returns:
        A list of human readable problems. Empty when the record is usable.
    """
    if isinstance(entry, FontFamily):
        return []
    if not isinstance(entry, Mapping):
        return [f"family #{index} is not an object"]

    errors: list[str] = []
    for key in ("name", "slug"):
        value = entry.get(key)
        if not isinstance(value, str) or not value:
            errors.append(f"family #{index} has no valid '{key}'")

    for key in ("classifications", "fvds"):
        value = entry.get(key)
        if value is not None and not _is_str_list(value):
            errors.append(f"family #{index}: '{key}' must be a list of strings")

    subset = entry.get("subset")
    if subset is not None and not isinstance(subset, str):
        errors.append(f"family #{index}: 'subset' must be a string")

    return errors


def validate_families(raw_families: Any) -> list[str]:
    if isinstance(raw_families, str | bytes | Mapping) or not isinstance(
        raw_families, Sequence
    ):
        return ["catalog families must be a list"]

    errors: list[str] = []
    for idx, entry in enumerate(raw_families):
        errors.extend(validate_family_entry(entry, idx))
    return errors


# ============================================================
# Index
# ============================================================


class _IndexState(NamedTuple):
    all_fonts: tuple[FontFamily, ...]
    by_classification: dict[str, tuple[FontFamily, ...]]
    by_slug: dict[str, FontFamily]
    by_name: dict[str, FontFamily]


_EMPTY_STATE = _IndexState((), {}, {}, {})


def _organize_families(families: Iterable[FontFamily]) -> _IndexState:
    # sorted() is stable: equal names keep their catalog order
    all_fonts = tuple(sorted(families, key=attrgetter("name")))

    by_classification: dict[str, list[FontFamily]] = {}
    by_slug: dict[str, FontFamily] = {}
    by_name: dict[str, FontFamily] = {}

    for family in all_fonts:
        for tag in family.classifications:
            by_classification.setdefault(tag, []).append(family)
        by_slug[family.slug] = family
        by_name[family.name] = family

    return _IndexState(
        all_fonts=all_fonts,
        by_classification={k: tuple(v) for k, v in by_classification.items()},
        by_slug=by_slug,
        by_name=by_name,
    )


class CatalogIndex:
    """
    Ordered, read-mostly index over a font catalog.

    The index is empty until :meth:`build` is called. Each build replaces the
    whole state with one assignment, so readers see either the previous or
    the new catalog, never a mix of both.
    """

    def __init__(self, raw_families: Sequence[Any] | None = None):
        self._state = _EMPTY_STATE
        self._build_lock = threading.Lock()
        if raw_families is not None:
            self.build(raw_families)

    def build(self, raw_families: Sequence[Any]) -> None:
        """
        Replace the index contents with ``raw_families``.

        Raises:
            DataError: if any record is malformed. The previous contents are
                left untouched.
        """
        errors = validate_families(raw_families)
        if errors:
            raise DataError(
                f"Invalid catalog data ({len(errors)} errors): {errors[0]}", errors
            )

        with self._build_lock:
            state = _organize_families(FontFamily.from_record(r) for r in raw_families)
            self._state = state

        logger.debug(
            "Catalog index built: %d families, %d classifications",
            len(state.all_fonts),
            len(state.by_classification),
        )

    def clear(self) -> None:
        with self._build_lock:
            self._state = _EMPTY_STATE

    @property
    def all_fonts(self) -> tuple[FontFamily, ...]:
        return self._state.all_fonts

    def lookup_by_classification(self, tag: str) -> list[FontFamily]:
        return list(self._state.by_classification.get(tag, ()))

    def lookup_by_slug(self, slug: str) -> FontFamily | None:
        return self._state.by_slug.get(slug)

    def lookup_by_name(self, name: str) -> FontFamily | None:
        return self._state.by_name.get(name)

    def classifications(self) -> list[str]:
        """Tags present in the catalog, in first-seen (alphabetical font) order."""
        return list(self._state.by_classification)

    def search_by_name(self, needle: str) -> list[FontFamily]:
        from edgefonts.search import search_by_name

        return search_by_name(self, needle)

    def __len__(self) -> int:
        return len(self._state.all_fonts)

    def __repr__(self) -> str:
        return f"<CatalogIndex families={len(self)}>"
