"""
edgefonts – fetch_catalog.py
============================

Loading of the raw family catalog, either from the remote ``families`` API
or from a local JSON dump with the same shape::

    {"families": [ {family record}, ... ]}

The remote fetch is a coroutine. It is never retried and never falls back to
cached data: failures surface as :class:`FetchError`.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import httpx

from edgefonts.catalog_index import CatalogIndex, DataError

logger = logging.getLogger(__name__)

DEFAULT_API_URL_PREFIX = "https://typekit.com/api/edge_internal_v1/"
API_URL_ENV = "EDGEFONTS_API_URL"
FAMILIES_ENDPOINT = "families"
DEFAULT_TIMEOUT = 15.0


class FetchError(RuntimeError):
    """Raised when the catalog cannot be retrieved from the remote API."""


def resolve_api_url_prefix(api_url_prefix: str | None = None) -> str:
    """Explicit prefix, else ``$EDGEFONTS_API_URL``, else the default."""
    return api_url_prefix or os.environ.get(API_URL_ENV) or DEFAULT_API_URL_PREFIX


def families_from_payload(payload: Any) -> list[Any]:
    """
    Extract the family list from an API payload.

    Raises:
        DataError: if the payload is not ``{"families": [...]}``.
    """
    if not isinstance(payload, dict):
        raise DataError("Invalid catalog payload: root is not a JSON object")
    families = payload.get("families")
    if not isinstance(families, list):
        raise DataError("Invalid catalog payload: 'families' missing or not a list")
    return families


async def fetch_families(
    api_url_prefix: str | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """
    Fetch the raw catalog payload from ``<prefix>families``.

    Args:
        api_url_prefix: Base URL of the API, ending with ``/``.
        client: Optional client to reuse (tests pass one with a mock
            transport). When omitted a short-lived client is created.
        timeout: Request timeout in seconds.

    Raises:
        FetchError: on transport errors, non-2xx responses or invalid JSON.
    """
    url = resolve_api_url_prefix(api_url_prefix) + FAMILIES_ENDPOINT
    logger.debug("Fetching font catalog from %s", url)

    try:
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True) as own_client:
                response = await own_client.get(url, timeout=timeout)
        else:
            response = await client.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(f"request to '{FAMILIES_ENDPOINT}' API failed: {e}") from e
    except ValueError as e:
        raise FetchError(
            f"request to '{FAMILIES_ENDPOINT}' API returned invalid JSON: {e}"
        ) from e

    logger.info("Fetched font catalog from %s", url)
    return payload


async def init_catalog(
    index: CatalogIndex,
    api_url_prefix: str | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> CatalogIndex:
    """
    Fetch the catalog and (re)build ``index`` from it.

    Wrap the coroutine in :func:`asyncio.create_task` to get a cancellable
    handle; the index is only touched once the fetch has completed.

    Raises:
        FetchError: if the fetch fails.
        DataError: if the payload is malformed. ``index`` is left unchanged.
    """
    payload = await fetch_families(api_url_prefix, client=client, timeout=timeout)
    index.build(families_from_payload(payload))
    return index


def load_catalog_file(path: Path) -> list[Any]:
    """
    Load the family list from a local JSON catalog dump.

    Raises:
        OSError: if the file cannot be read.
        DataError: if the file is not valid JSON or has the wrong shape.
    """
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataError(f"Invalid catalog file {path}: {e}") from e
    return families_from_payload(payload)
