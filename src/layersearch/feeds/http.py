"""Shared HTTP helper for the live event feeds."""

from __future__ import annotations

import httpx

USER_AGENT = "layersearch/0.1.0"


def get_json(url: str, client: httpx.Client | None = None, timeout: float = 15.0) -> dict:
    """GET a JSON object, bypassing caches.

    Raises:
        httpx.HTTPError: On transport failure or a non-2xx status.
        ValueError: If the body is not a JSON object.
    """
    headers = {"User-Agent": USER_AGENT, "Cache-Control": "no-cache"}
    if client is None:
        with httpx.Client(timeout=timeout) as owned:
            resp = owned.get(url, headers=headers)
    else:
        resp = client.get(url, headers=headers)
    resp.raise_for_status()
    data = resp.json()
    if not isinstance(data, dict):
        raise ValueError("Feed did not return a JSON object")
    return data
