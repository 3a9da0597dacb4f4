"""Strapi REST client: fetch one page of articles (flat v5 response shape)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import ITEMS_PER_PAGE, STRAPI_API_TOKEN, STRAPI_API_URL

logger = logging.getLogger(__name__)

# Swapped for httpx.MockTransport in tests.
_transport: httpx.BaseTransport | None = None


def _raise_http_error(resp: httpx.Response, *, hint: str = "") -> None:
    body = ""
    try:
        body = resp.text
    except Exception:
        body = "<unreadable body>"
    msg = f"HTTP {resp.status_code} for {resp.request.method} {resp.request.url}\nResponse body: {body}"
    if hint:
        msg = hint + "\n" + msg
    raise RuntimeError(msg)


def _get_json(url: str, *, token: str | None, params: dict[str, Any] | None, timeout: float) -> Any:
    headers: dict[str, str] = {"Accept": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    with httpx.Client(timeout=timeout, transport=_transport) as client:
        resp = client.get(url, params=params, headers=headers)
        if resp.status_code >= 400:
            _raise_http_error(resp)
        return resp.json()


def fetch_articles(
    page: int = 1,
    page_size: int = ITEMS_PER_PAGE,
    *,
    api_url: str | None = None,
    token: str | None = None,
) -> dict[str, Any]:
    """GET /api/articles?pagination[page]=..&pagination[pageSize]=..&populate=*.

    Returns {"items": [...], "total": int, "page_count": int}.
    Raises RuntimeError on HTTP errors and ValueError when the body is not a Strapi collection response.
    """
    url = api_url or STRAPI_API_URL
    params = {
        "pagination[page]": page,
        "pagination[pageSize]": page_size,
        "populate": "*",
    }
    data = _get_json(url, token=token or STRAPI_API_TOKEN, params=params, timeout=15.0)

    pagination = None
    if isinstance(data, dict) and isinstance(data.get("meta"), dict):
        pagination = data["meta"].get("pagination")
    if not isinstance(data, dict) or not isinstance(data.get("data"), list) or not isinstance(pagination, dict):
        logger.error("Unexpected data structure from Strapi API: %r", data)
        raise ValueError("Unexpected data format from API.")

    items = data["data"]
    logger.info(
        "Fetched %d articles (page %s/%s, total %s)",
        len(items), page, pagination.get("pageCount"), pagination.get("total"),
    )
    return {
        "items": items,
        "total": int(pagination.get("total") or 0),
        "page_count": int(pagination.get("pageCount") or 0),
    }
