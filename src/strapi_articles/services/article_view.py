"""Strapi article items → card (grid) and detail (modal) view data."""

from __future__ import annotations

import logging
from typing import Any

from ..config import STRAPI_BASE_URL
from .block_renderer import render_blocks_to_html

logger = logging.getLogger(__name__)

NO_IMAGE_URL = "https://placehold.co/400x250/cccccc/333333?text=No+Image"
IMAGE_ERROR_URL = "https://placehold.co/400x250/cccccc/333333?text=Image+Load+Error"
EMPTY_PAGE_MESSAGE = "No content available. Please ensure articles are published in Strapi."
EXCERPT_CHARS = 150


def _image_url(item: dict[str, Any], base_url: str) -> str | None:
    image = item.get("image")
    if isinstance(image, dict) and image.get("url"):
        return f"{base_url}{image['url']}"
    return None


def article_detail(item: dict[str, Any], base_url: str | None = None) -> dict[str, Any]:
    """Title, header image and rendered content for the article modal."""
    base = STRAPI_BASE_URL if base_url is None else base_url
    title = item.get("title") or ""
    return {
        "title": title or "No Title",
        "image_url": _image_url(item, base),
        "image_alt": title or "Article Image",
        "content_html": render_blocks_to_html(item.get("content"), base_url=base),
    }


def article_card(item: dict[str, Any], base_url: str | None = None) -> dict[str, Any]:
    base = STRAPI_BASE_URL if base_url is None else base_url
    description = str(item.get("description") or "No description available for this item.")
    return {
        "id": item.get("id"),
        "document_id": item.get("documentId"),
        "title": item.get("title") or "No Title Provided",
        "excerpt": f"{description[:EXCERPT_CHARS]}...",
        "image_url": _image_url(item, base) or NO_IMAGE_URL,
        "image_error_url": IMAGE_ERROR_URL,
        "detail": article_detail(item, base),
    }


def article_page(
    items: list[Any],
    *,
    total: int,
    page: int,
    page_size: int,
    page_count: int,
    base_url: str | None = None,
) -> dict[str, Any]:
    """Build the grid page payload; malformed (empty or non-object) items are skipped."""
    cards: list[dict[str, Any]] = []
    for item in items:
        if not item or not isinstance(item, dict):
            logger.warning("Skipping malformed or empty item: %r", item)
            continue
        cards.append(article_card(item, base_url))
    return {
        "items": cards,
        "total": total,
        "page": page,
        "page_size": page_size,
        "page_count": page_count,
        "message": None if cards else EMPTY_PAGE_MESSAGE,
    }
