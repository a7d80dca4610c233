from helpers import make_family, names

from edgefonts.catalog_index import CatalogIndex


def _catalog():
    return [
        make_family("Merriweather", classifications=["serif"]),
        make_family("Arvo", classifications=["slab-serif", "serif"]),
        make_family("Open Sans", classifications=["sans-serif"]),
        make_family("Pacifico", classifications=["script", "handmade"]),
        make_family("Oddity", classifications=["psychedelic"]),
    ]


def test_lookup_by_classification_in_alphabetical_order():
    index = CatalogIndex(_catalog())

    assert names(index.lookup_by_classification("serif")) == ["Arvo", "Merriweather"]
    assert names(index.lookup_by_classification("handmade")) == ["Pacifico"]


def test_lookup_by_classification_matches_all_fonts_subset():
    index = CatalogIndex(_catalog())

    for tag in index.classifications():
        expected = [f for f in index.all_fonts if tag in f.classifications]
        assert index.lookup_by_classification(tag) == expected


def test_lookup_by_classification_unknown_tag():
    index = CatalogIndex(_catalog())

    assert index.lookup_by_classification("blackletter") == []
    assert index.lookup_by_classification("nope") == []


def test_unrecognized_tag_is_indexed():
    index = CatalogIndex(_catalog())

    assert names(index.lookup_by_classification("psychedelic")) == ["Oddity"]


def test_lookup_by_classification_returns_copy():
    index = CatalogIndex(_catalog())

    index.lookup_by_classification("serif").clear()

    assert len(index.lookup_by_classification("serif")) == 2


def test_classifications_first_seen_order():
    index = CatalogIndex(_catalog())

    assert index.classifications() == [
        "slab-serif",
        "serif",
        "psychedelic",
        "sans-serif",
        "script",
        "handmade",
    ]


def test_lookup_by_slug():
    index = CatalogIndex(_catalog())

    assert index.lookup_by_slug("open-sans").name == "Open Sans"
    assert index.lookup_by_slug("missing") is None


def test_lookup_by_slug_last_write_wins():
    index = CatalogIndex(
        [
            make_family("Alpha", slug="dup"),
            make_family("Beta", slug="dup"),
        ]
    )

    assert index.lookup_by_slug("dup").name == "Beta"


def test_lookup_by_name():
    index = CatalogIndex(_catalog())

    assert index.lookup_by_name("Arvo").slug == "arvo"
    assert index.lookup_by_name("arvo") is None
