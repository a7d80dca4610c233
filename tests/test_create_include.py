import pytest

from edgefonts.catalog_index import FontFamily
from edgefonts.include import create_include, create_script_tag, parse_selection


def test_create_include_single():
    fonts = [{"slug": "droid-sans", "fvds": ["n4", "n7"], "subset": "default"}]

    assert create_include(fonts) == "droid-sans:n4,n7:default"


def test_create_include_multiple():
    fonts = [
        {"slug": "droid-sans", "fvds": ["n4"], "subset": "default"},
        {"slug": "arvo", "fvds": ["n4", "i4"], "subset": "all"},
    ]

    assert create_include(fonts) == "droid-sans:n4:default;arvo:n4,i4:all"


def test_create_include_from_font_family():
    family = FontFamily(name="Arvo", slug="arvo", fvds=("n7",), subset="default")

    assert create_include([family]) == "arvo:n7:default"


def test_create_include_empty():
    assert create_include([]) == ""


def test_create_script_tag():
    fonts = [{"slug": "droid-sans", "fvds": ["n4", "n7"], "subset": "default"}]

    assert create_script_tag(fonts) == (
        '<script src="http://webfonts.creativecloud.com/droid-sans:n4,n7:default.js">'
        "</script>"
    )


def test_parse_selection_full():
    assert parse_selection("arvo:n4,n7:all") == {
        "slug": "arvo",
        "fvds": ["n4", "n7"],
        "subset": "all",
    }


def test_parse_selection_defaults():
    assert parse_selection("arvo") == {"slug": "arvo", "fvds": ["n4"], "subset": "default"}


def test_parse_selection_missing_slug():
    with pytest.raises(ValueError):
        parse_selection(":n4:default")


def test_create_include_keeps_empty_subset():
    family = FontFamily(name="Arvo", slug="arvo", fvds=("n4",), subset="")

    assert create_include([family]) == "arvo:n4:"
