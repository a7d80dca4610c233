"""
English UI strings for the font picker.

Classification tags are shared with :mod:`edgefonts.catalog_index`; a tag
without an entry here has no localized label.
"""

from __future__ import annotations

from collections.abc import Mapping

from edgefonts.catalog_index import FONT_CLASSIFICATIONS

STRINGS: dict[str, str] = {
    # classifications
    "serif": "Serif",
    "sans-serif": "Sans Serif",
    "slab-serif": "Slab Serif",
    "script": "Script",
    "blackletter": "Blackletter",
    "monospaced": "Monospaced",
    "handmade": "Handmade",
    "decorative": "Decorative",
    # ui
    "no_results": "No fonts found.",
    "search_results": "Search results for",
    "classification_results": "Fonts classified as",
}


def localized_classifications(
    strings: Mapping[str, str] = STRINGS,
) -> list[dict[str, str | None]]:
    """Return ``{"class_name", "localized_name"}`` pairs in display order."""
    return [
        {"class_name": tag, "localized_name": strings.get(tag)}
        for tag in FONT_CLASSIFICATIONS
    ]


def classification_label(tag: str, strings: Mapping[str, str] = STRINGS) -> str:
    return strings.get(tag, tag)
