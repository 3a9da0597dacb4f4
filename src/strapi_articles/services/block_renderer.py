"""Strapi rich-text blocks → HTML string.

Input is the parsed JSON of a Strapi "blocks" field: a list of block dicts
(`paragraph`, `heading`, `list`, `quote`, `code`, `image`) whose `children`
are inline nodes (`text` with boolean marks, or `link` with nested children).

Rendering never raises. Unknown inline nodes are dropped and unknown blocks are
surfaced in an "Unhandled Content" wrapper; both are logged as warnings.

Some editors export bullet/numbered lists as plain paragraphs starting with a
marker ("- ", "1. "). Consecutive marker paragraphs are regrouped into real
<ul>/<ol> containers; see `detect_list_marker`.
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Literal

from ..config import STRAPI_BASE_URL

logger = logging.getLogger(__name__)

ListKind = Literal["ordered", "unordered"]

FALLBACK_HTML = "<p>No detailed content available or content format is unexpected.</p>"
IMAGE_PLACEHOLDER_URL = "https://placehold.co/600x400/cccccc/333333?text=Image+Not+Loaded"

_LINK_CLASS = "text-blue-600 hover:underline"
_HEADING_SIZES = {1: "text-4xl", 2: "text-3xl", 3: "text-2xl", 4: "text-xl", 5: "text-lg", 6: "text-base"}

_UNORDERED_MARKER = re.compile(r"^[*\-•]\s")
_ORDERED_MARKER = re.compile(r"^\d+\.\s")


def _wrap(tag: str) -> Callable[[str], str]:
    return lambda html: f"<{tag}>{html}</{tag}>"


# Outermost first: bold encloses everything, code sits closest to the text.
_MARKS: list[tuple[str, Callable[[str], str]]] = [
    ("bold", _wrap("strong")),
    ("italic", _wrap("em")),
    ("underline", _wrap("u")),
    ("strikethrough", _wrap("s")),
    ("code", _wrap("code")),
]


@dataclass(frozen=True)
class ListMarker:
    """A paragraph recognised as a list item."""

    kind: ListKind
    text: str  # text with the marker prefix removed


@dataclass
class _ListAccumulator:
    kind: ListKind | None = None
    items: list[str] = field(default_factory=list)


def render_blocks_to_html(blocks: Any, base_url: str | None = None) -> str:
    """Render a sequence of Strapi blocks to an HTML string.

    `base_url` is prepended to relative image paths (defaults to STRAPI_BASE_URL).
    Absent or non-list input yields a fixed "no content" paragraph.
    """
    if not _is_sequence(blocks):
        return FALLBACK_HTML
    base = STRAPI_BASE_URL if base_url is None else base_url

    parts: list[str] = []
    acc = _ListAccumulator()
    for block in blocks:
        marker = _marker_for_block(block)
        if marker is not None:
            if acc.kind is not None and acc.kind != marker.kind:
                acc = _flush_list(acc, parts)
            acc.kind = marker.kind
            children = block["children"]
            first = dict(children[0], text=marker.text)
            acc.items.append(f'<li class="mb-1">{render_inline([first, *children[1:]])}</li>')
            continue

        acc = _flush_list(acc, parts)
        parts.append(_render_block(block, base))

    _flush_list(acc, parts)
    return "".join(parts)


def render_inline(nodes: Any) -> str:
    """Render inline children (text with marks, links) to HTML."""
    if not _is_sequence(nodes):
        return ""
    return "".join(_render_inline_node(node) for node in nodes)


def detect_list_marker(text: str) -> ListMarker | None:
    """Return the list kind and marker-stripped text if `text` starts with a list marker."""
    m = _ORDERED_MARKER.match(text)
    if m:
        return ListMarker(kind="ordered", text=text[m.end():])
    m = _UNORDERED_MARKER.match(text)
    if m:
        return ListMarker(kind="unordered", text=text[m.end():])
    return None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _marker_for_block(block: Any) -> ListMarker | None:
    if not isinstance(block, dict) or block.get("type") != "paragraph":
        return None
    children = block.get("children")
    if not _is_sequence(children) or not children or not isinstance(children[0], dict):
        return None
    return detect_list_marker(_text_of(children[0]))


def _flush_list(acc: _ListAccumulator, parts: list[str]) -> _ListAccumulator:
    """Emit the collected list items (if any) and return an empty accumulator."""
    if acc.kind is None or not acc.items:
        return _ListAccumulator()
    if acc.kind == "ordered":
        tag, style = "ol", "list-decimal"
    else:
        tag, style = "ul", "list-disc"
    parts.append(f'<{tag} class="list-inside {style} pl-5 mb-4">{"".join(acc.items)}</{tag}>')
    return _ListAccumulator()


def _text_of(node: dict[str, Any]) -> str:
    text = node.get("text")
    if text is None or text is False:
        return ""
    return str(text)


def _anchor(url: Any, inner: str) -> str:
    return f'<a href="{url}" class="{_LINK_CLASS}" target="_blank">{inner}</a>'


def _apply_marks(node: dict[str, Any], text: str) -> str:
    html = text
    for mark, wrap in reversed(_MARKS):
        if node.get(mark):
            html = wrap(html)
    return html


def _render_inline_node(node: Any) -> str:
    if not isinstance(node, dict):
        logger.warning("Unknown or unhandled inline child: %r", node)
        return ""
    t = node.get("type")
    if t == "text":
        html = _apply_marks(node, _text_of(node))
        # Some exports flatten a link onto the text node itself.
        if node.get("url"):
            html = _anchor(node["url"], html)
        return html
    if t == "link" and node.get("url") and node.get("children"):
        return _anchor(node["url"], render_inline(node["children"]))
    logger.warning("Unknown or unhandled inline child type: %s %r", t, node)
    return ""


def _heading_level(value: Any) -> int:
    """Lenient integer parse of a heading level, clamped to 1..6 (invalid → 1)."""
    level = 1
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        level = value
    elif isinstance(value, float) and math.isfinite(value):
        level = int(value)
    elif isinstance(value, str):
        m = re.match(r"\s*([+-]?\d+)", value)
        level = int(m.group(1)) if m else 1
    return max(1, min(6, level))


def _render_block(block: Any, base_url: str) -> str:
    t = block.get("type") if isinstance(block, dict) else None
    if t == "paragraph":
        return f'<p class="mb-4">{render_inline(block.get("children"))}</p>'
    if t == "heading":
        level = _heading_level(block.get("level"))
        classes = f"{_HEADING_SIZES[level]} font-bold text-gray-800 mt-6 mb-3"
        return f'<h{level} class="{classes}">{render_inline(block.get("children"))}</h{level}>'
    if t == "list":
        return _render_list_block(block)
    if t == "quote":
        return (
            '<blockquote class="border-l-4 border-blue-500 pl-4 py-2 my-4 text-gray-700 italic">'
            f"{render_inline(block.get('children'))}</blockquote>"
        )
    if t == "code":
        children = block.get("children")
        code = ""
        if _is_sequence(children) and children and isinstance(children[0], dict):
            code = _text_of(children[0])
        return (
            '<pre class="bg-gray-100 p-4 rounded-md overflow-x-auto my-4">'
            f'<code class="text-gray-800">{code}</code></pre>'
        )
    if t == "image":
        return _render_image_block(block, base_url)
    return _render_unhandled_block(block)


def _render_list_block(block: dict[str, Any]) -> str:
    ordered = block.get("format") == "ordered"
    tag, style = ("ol", "list-decimal") if ordered else ("ul", "list-disc")
    items: list[str] = []
    children = block.get("children")
    for item in children if _is_sequence(children) else []:
        if isinstance(item, dict) and item.get("type") == "list-item":
            items.append(f'<li class="mb-1">{render_inline(item.get("children"))}</li>')
    return f'<{tag} class="list-inside {style} pl-5 mb-4">{"".join(items)}</{tag}>'


def _render_image_block(block: dict[str, Any], base_url: str) -> str:
    image = block.get("image")
    if not isinstance(image, dict) or not image.get("url"):
        return ""
    src = f"{base_url}{image['url']}"
    alt = image.get("alt") or ""
    onerror = f"this.onerror=null;this.src='{IMAGE_PLACEHOLDER_URL}';"
    return f'<img src="{src}" alt="{alt}" class="w-full h-auto object-cover rounded-md my-4" onerror="{onerror}"/>'


def _render_unhandled_block(block: Any) -> str:
    t = block.get("type") if isinstance(block, dict) else None
    logger.warning("Unknown or unhandled Strapi block type: %s %r", t, block)
    prefix = '<p class="mb-4 text-red-500">'
    if isinstance(block, dict):
        if block.get("children") is not None:
            return f"{prefix}<strong>Unhandled Content:</strong> {render_inline(block['children'])}</p>"
        if block.get("text"):
            return f"{prefix}<strong>Unhandled Content:</strong> {block['text']}</p>"
    dump = json.dumps(block, ensure_ascii=False, separators=(",", ":"), skipkeys=True, default=str)
    return f"{prefix}DEBUG: Unhandled block type with no text content: {dump}</p>"
