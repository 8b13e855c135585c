"""Read and write paths of the admin post pages.

The view parses the request into explicit inputs and hands them here; nothing
in this module touches ``flask.request``.
"""
from __future__ import annotations

from typing import Tuple, Union

import structlog

from markdown_blog.models.post import Post
from markdown_blog.repositories.posts import create_post, delete_post, get_post, update_post
from markdown_blog.schemas.posts import (
    ActionErrors,
    DeletePostAction,
    PostFields,
    UpdatePostAction,
)
from markdown_blog.services.posts import invalidate_post_html
from markdown_blog.utils.invariant import invariant

ADMIN_POSTS_PATH = "/posts/admin"

# Static admin routes that would shadow /posts/admin/<slug>
RESERVED_SLUGS = frozenset({"new"})

log = structlog.get_logger()

# (redirect location, validation errors); exactly one side is set
ActionResult = Tuple[Union[str, None], Union[ActionErrors, None]]


def load_post(slug: str | None) -> Post:
    invariant(slug, "params.slug is required")
    post = get_post(slug)
    invariant(post, f"Post not found: {slug}")
    return post


def handle_action(action: Union[UpdatePostAction, DeletePostAction]) -> ActionResult:
    if isinstance(action, UpdatePostAction):
        return _update(action)
    return _delete(action)


def _update(action: UpdatePostAction) -> ActionResult:
    errors = action.missing_field_errors()
    if errors.has_errors:
        log.info("post_update_rejected", slug=action.slug, errors=errors.model_dump(exclude_none=True))
        return None, errors

    invariant(isinstance(action.title, str), "title must be a string")
    invariant(isinstance(action.slug, str), "slug must be a string")
    invariant(isinstance(action.markdown, str), "markdown must be a string")

    update_post(action.slug, title=action.title, slug=action.slug, markdown=action.markdown)
    invalidate_post_html(action.slug)
    log.info("post_updated", slug=action.slug)
    return ADMIN_POSTS_PATH, None


def _delete(action: DeletePostAction) -> ActionResult:
    delete_post(action.slug)
    invalidate_post_html(action.slug)
    log.info("post_deleted", slug=action.slug)
    return ADMIN_POSTS_PATH, None


def create_post_from_fields(fields: PostFields) -> ActionResult:
    errors = fields.missing_field_errors()
    if errors.has_errors:
        return None, errors
    if fields.slug in RESERVED_SLUGS:
        return None, ActionErrors(slug="This slug is reserved")
    try:
        create_post(title=fields.title, slug=fields.slug, markdown=fields.markdown)
    except ValueError as e:
        if str(e) != "slug_conflict":
            raise
        return None, ActionErrors(slug="A post with this slug already exists")
    log.info("post_created", slug=fields.slug)
    return ADMIN_POSTS_PATH, None
