from __future__ import annotations

from flask import abort, current_app, jsonify, redirect, render_template, request, url_for
from markupsafe import Markup

from markdown_blog.extensions import limiter
from markdown_blog.repositories.posts import get_post, list_posts
from markdown_blog.services.posts import get_post_html

from markdown_blog.blueprints.blog import bp


@bp.get("/")
def home():
    return redirect(url_for("blog.index"))


@bp.get("/posts", endpoint="index")
@limiter.limit("120 per minute")
def index():
    """Public post listing"""
    page = max(request.args.get('page', 1, type=int), 1)
    per_page = current_app.config.get("POSTS_PER_PAGE", 10)
    posts, total = list_posts(page=page, per_page=per_page)

    if request.args.get("format") == "json":
        return jsonify({
            "status": "ok",
            "posts": [{"slug": p.slug, "title": p.title} for p in posts],
            "total": total,
            "current_page": page,
        })
    return render_template("blog/index.html", posts=posts, total=total, page=page, per_page=per_page)


@bp.get("/posts/<slug>", endpoint="post")
@limiter.limit("120 per minute")
def post_detail(slug: str):
    post = get_post(slug)
    if not post:
        abort(404)
    html = get_post_html(slug) or ""
    if request.args.get("format") == "json":
        return jsonify({
            "status": "ok",
            "post": {
                "slug": post.slug,
                "title": post.title,
                "markdown": post.markdown,
                "html": html,
                "created_at": post.created_at.isoformat() if post.created_at else None,
                "updated_at": post.updated_at.isoformat() if post.updated_at else None,
            },
        })
    # Markdown output is sanitized by render_markdown
    return render_template("blog/post.html", post=post, post_html=Markup(html))
