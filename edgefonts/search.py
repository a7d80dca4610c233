"""
edgefonts – search.py
=====================

Ranked substring search over a :class:`~edgefonts.catalog_index.CatalogIndex`.

Results are grouped in three tiers:

1. fonts whose name starts with the needle,
2. fonts with a word (inside the name) that starts with the needle,
3. fonts that merely contain the needle.

Within each tier fonts keep the alphabetical order of ``all_fonts``, so no
extra sort is needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from edgefonts.catalog_index import fold_case

if TYPE_CHECKING:
    from edgefonts.catalog_index import CatalogIndex, FontFamily

TIER_PREFIX = 1
TIER_WORD_START = 2
TIER_CONTAINS = 3


def match_tier(lower_case_name: str, folded_needle: str) -> int | None:
    """
    Classify how ``folded_needle`` occurs in ``lower_case_name``.

    Only the first occurrence is considered. Both arguments must already be
    folded with :func:`~edgefonts.catalog_index.fold_case`.

    Returns:
        ``TIER_PREFIX``, ``TIER_WORD_START``, ``TIER_CONTAINS`` or ``None``
        when the needle does not occur.
    """
    idx = lower_case_name.find(folded_needle)
    if idx < 0:
        return None
    if idx == 0:
        return TIER_PREFIX

    previous = lower_case_name[idx - 1]
    if not previous.isalpha() and not previous.isdigit():
        return TIER_WORD_START
    return TIER_CONTAINS


def search_by_name(index: CatalogIndex, needle: str) -> list[FontFamily]:
    """
    Return all fonts whose name contains ``needle``, ignoring case.

    An empty needle matches every font at position 0, so the whole catalog
    is returned alphabetically.
    """
    beginning: list[FontFamily] = []
    beginning_of_word: list[FontFamily] = []
    contains: list[FontFamily] = []

    folded = fold_case(needle)

    for font in index.all_fonts:
        tier = match_tier(font.lower_case_name, folded)
        if tier == TIER_PREFIX:
            beginning.append(font)
        elif tier == TIER_WORD_START:
            beginning_of_word.append(font)
        elif tier == TIER_CONTAINS:
            contains.append(font)

    return beginning + beginning_of_word + contains
