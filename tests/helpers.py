def make_family(
    name: str,
    slug: str | None = None,
    classifications: list[str] | None = None,
    fvds: list[str] | None = None,
    subset: str = "default",
) -> dict:
    """Factory for a raw family record as returned by the 'families' API."""
    return {
        "name": name,
        "slug": slug or name.lower().replace(" ", "-"),
        "classifications": classifications or [],
        "fvds": fvds or ["n4"],
        "subset": subset,
    }


def make_catalog(*names: str) -> list[dict]:
    return [make_family(n) for n in names]


def names(families) -> list[str]:
    return [f.name for f in families]
