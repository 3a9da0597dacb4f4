"""Pydantic models for API request/response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ArticleDetail(BaseModel):
    title: str
    image_url: str | None = None
    image_alt: str
    content_html: str


class ArticleCard(BaseModel):
    id: int | str | None = None
    document_id: str | None = None
    title: str
    excerpt: str
    image_url: str
    image_error_url: str
    detail: ArticleDetail


class ArticleListResponse(BaseModel):
    items: list[ArticleCard]
    total: int
    page: int
    page_size: int
    page_count: int
    message: str | None = None


class RenderRequest(BaseModel):
    # Raw Strapi blocks; anything that is not a list renders the fallback message.
    blocks: Any = None
    base_url: str | None = None


class RenderResponse(BaseModel):
    html: str
