from helpers import make_family

from edgefonts.catalog_index import validate_families, validate_family_entry


def test_validate_family_entry_valid():
    assert validate_family_entry(make_family("Arvo"), index=0) == []


def test_validate_family_entry_not_a_dict():
    errors = validate_family_entry("Arvo", index=3)

    assert errors == ["family #3 is not an object"]


def test_validate_family_entry_missing_name_and_slug():
    errors = validate_family_entry({}, index=0)

    assert len(errors) == 2


def test_validate_family_entry_empty_name():
    errors = validate_family_entry(make_family("", slug="x"), index=0)

    assert errors == ["family #0 has no valid 'name'"]


def test_validate_family_entry_classifications_wrong_type():
    entry = make_family("Arvo")
    entry["classifications"] = "serif"

    errors = validate_family_entry(entry, index=0)
    assert errors  # structural error


def test_validate_family_entry_subset_wrong_type():
    entry = make_family("Arvo")
    entry["subset"] = 1

    errors = validate_family_entry(entry, index=0)
    assert errors


def test_validate_families_collects_all_errors():
    errors = validate_families([make_family("Arvo"), {}, 42])

    assert len(errors) == 3


def test_validate_families_rejects_string():
    assert validate_families("Arvo") == ["catalog families must be a list"]
