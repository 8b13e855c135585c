from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError

from markdown_blog.extensions import db
from markdown_blog.models.post import Post
from markdown_blog.utils.db_retry import retry_db_operation


@retry_db_operation()
def get_post(slug: str) -> Optional[Post]:
    return db.session.execute(db.select(Post).filter_by(slug=slug)).scalar_one_or_none()


@retry_db_operation()
def list_posts(page: int = 1, per_page: int = 10) -> tuple[list[Post], int]:
    stmt = db.select(Post).order_by(Post.created_at.desc(), Post.id.desc())
    pag = db.paginate(stmt, page=page, per_page=per_page, error_out=False)
    return list(pag.items), pag.total


def create_post(*, title: str, slug: str, markdown: str) -> Post:
    p = Post(title=title, slug=slug, markdown=markdown)
    db.session.add(p)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("slug_conflict")
    return p


def update_post(current_slug: str, *, title: str, slug: str, markdown: str) -> Post:
    """Overwrite the post stored under ``current_slug``.

    Last write wins: there is no version check between load and update.
    """
    p = get_post(current_slug)
    if p is None:
        raise ValueError("post_not_found")
    p.title = title
    p.slug = slug
    p.markdown = markdown
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("slug_conflict")
    return p


def delete_post(slug: str) -> None:
    p = get_post(slug)
    if p is None:
        raise ValueError("post_not_found")
    db.session.delete(p)
    db.session.commit()
