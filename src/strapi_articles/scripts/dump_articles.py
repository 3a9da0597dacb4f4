"""Print one page of Strapi articles with their rendered content.

Usage:
  python -m strapi_articles.scripts.dump_articles [page] [page_size]

Env:
  STRAPI_BASE_URL
  STRAPI_API_URL (optional)
  STRAPI_API_TOKEN (optional)
"""

from __future__ import annotations

import sys

from ..config import ITEMS_PER_PAGE
from ..services.article_view import article_page
from ..services.strapi_client import fetch_articles


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    try:
        page = int(args[0]) if args else 1
        page_size = int(args[1]) if len(args) > 1 else ITEMS_PER_PAGE
    except ValueError:
        raise SystemExit("page and page_size must be integers")

    result = fetch_articles(page, page_size)
    data = article_page(
        result["items"],
        total=result["total"],
        page=page,
        page_size=page_size,
        page_count=result["page_count"],
    )
    print(f"page {data['page']}/{data['page_count']} (total {data['total']})")
    if data["message"]:
        print(data["message"])
    for card in data["items"]:
        print("-" * 60)
        print("title:", card["title"])
        print("image:", card["image_url"])
        print(card["detail"]["content_html"])


if __name__ == "__main__":
    main()
