from __future__ import annotations

from markdown_blog.extensions import cache
from markdown_blog.repositories.posts import get_post
from markdown_blog.utils.markdown import render_markdown


@cache.memoize()
def get_post_html(slug: str) -> str | None:
    """Rendered HTML for the post stored under ``slug``, or ``None``."""
    post = get_post(slug)
    if post is None:
        return None
    return render_markdown(post.markdown)


def invalidate_post_html(*slugs: str) -> None:
    for slug in slugs:
        cache.delete_memoized(get_post_html, slug)
