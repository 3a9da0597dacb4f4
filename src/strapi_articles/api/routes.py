"""API routes: article grid page and blocks rendering."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ..config import ITEMS_PER_PAGE
from ..models import ArticleListResponse, RenderRequest, RenderResponse
from ..services.article_view import article_page
from ..services.block_renderer import render_blocks_to_html
from ..services.strapi_client import fetch_articles

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/articles", response_model=ArticleListResponse)
def api_articles(page: int = 1, page_size: int = ITEMS_PER_PAGE):
    """Fetch one page of articles from Strapi. Each card carries its rendered detail view."""
    if page < 1 or page_size < 1:
        raise HTTPException(400, "page and page_size must be positive")
    try:
        result = fetch_articles(page, page_size)
    except ValueError as e:
        raise HTTPException(502, f"Failed to load content: {e}")
    except Exception as e:
        logger.error("Error fetching content from Strapi: %s", e)
        raise HTTPException(502, f"Failed to fetch content: {e}")
    data = article_page(
        result["items"],
        total=result["total"],
        page=page,
        page_size=page_size,
        page_count=result["page_count"],
    )
    return ArticleListResponse(**data)


@router.post("/render", response_model=RenderResponse)
def api_render(body: RenderRequest):
    """Render raw Strapi rich-text blocks to HTML."""
    return RenderResponse(html=render_blocks_to_html(body.blocks, base_url=body.base_url))
