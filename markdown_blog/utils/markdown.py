from __future__ import annotations

import bleach
import markdown as md
from pygments.formatters import HtmlFormatter

MARKDOWN_EXTENSIONS = ["fenced_code", "codehilite", "tables", "sane_lists"]

ALLOWED_TAGS = bleach.sanitizer.ALLOWED_TAGS.union(
    {
        "p", "pre", "code", "img", "span", "div", "br", "hr",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "table", "thead", "tbody", "tr", "th", "td",
    }
)
ALLOWED_ATTRS = {
    **bleach.sanitizer.ALLOWED_ATTRIBUTES,
    "img": ["src", "alt", "title"],
    "code": ["class"],
    "span": ["class"],
    "div": ["class"],
    "th": ["align"],
    "td": ["align"],
}


def render_markdown(text: str) -> str:
    """Render a post's markdown body to sanitized HTML."""
    html = md.markdown(
        text or "",
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs={
            "codehilite": {"guess_lang": False, "pygments_style": "default"}
        },
        output_format="html",
    )
    return bleach.clean(html, tags=ALLOWED_TAGS, attributes=ALLOWED_ATTRS, strip=True)


def pygments_css() -> str:
    return HtmlFormatter().get_style_defs('.codehilite')
