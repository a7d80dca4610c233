"""
Helpers that turn a font selection into an include string.

A selection is anything with ``slug``, ``fvds`` and ``subset``: a plain dict
or a :class:`~edgefonts.catalog_index.FontFamily`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

FONT_INCLUDE_PREFIX = '<script src="http://webfonts.creativecloud.com/'
FONT_INCLUDE_SUFFIX = '.js"></script>'


def _field(selection: Mapping[str, Any] | Any, name: str) -> Any:
    if isinstance(selection, Mapping):
        return selection[name]
    return getattr(selection, name)


def create_include(selections: Iterable[Mapping[str, Any] | Any]) -> str:
    """
    Serialize selections as ``slug:fvd1,fvd2:subset`` joined by ``;``.

    Example::

        >>> create_include([{"slug": "droid-sans", "fvds": ["n4", "n7"], "subset": "default"}])
        'droid-sans:n4,n7:default'
    """
    font_strings = [
        f"{_field(s, 'slug')}:{','.join(_field(s, 'fvds'))}:{_field(s, 'subset')}"
        for s in selections
    ]
    return ";".join(font_strings)


def create_script_tag(selections: Iterable[Mapping[str, Any] | Any]) -> str:
    """Wrap :func:`create_include` in the web font loader ``<script>`` tag."""
    return FONT_INCLUDE_PREFIX + create_include(selections) + FONT_INCLUDE_SUFFIX


def parse_selection(text: str, default_subset: str = "default") -> dict[str, Any]:
    """
    Parse a CLI selection of the form ``slug[:fvd1,fvd2[:subset]]``.

    Raises:
        ValueError: if the slug part is empty.
    """
    slug, _, rest = text.partition(":")
    fvds_part, _, subset = rest.partition(":")
    if not slug:
        raise ValueError(f"Invalid font selection '{text}': missing slug")
    fvds = [v for v in fvds_part.split(",") if v] if fvds_part else ["n4"]
    return {"slug": slug, "fvds": fvds, "subset": subset or default_subset}
