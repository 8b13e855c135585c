from __future__ import annotations

from flask import abort, current_app, flash, redirect, render_template, request

from markdown_blog.extensions import limiter
from markdown_blog.forms.posts import DeletePostForm, EditPostForm, NewPostForm
from markdown_blog.repositories.posts import list_posts
from markdown_blog.schemas.posts import InvalidActionError, UpdatePostAction, parse_post_action, parse_post_fields
from markdown_blog.services.post_admin import create_post_from_fields, handle_action, load_post

from markdown_blog.blueprints.admin import bp


def _write_limit() -> str:
    return current_app.config["ADMIN_WRITE_RATE_LIMIT"]


@bp.get("", endpoint="posts_list")
def posts_list():
    """List all posts for admin management"""
    page = max(request.args.get('page', 1, type=int), 1)
    per_page = current_app.config.get("POSTS_PER_PAGE", 10)

    posts, total = list_posts(page=page, per_page=per_page)
    return render_template(
        "admin/posts_list.html",
        posts=posts,
        total=total,
        page=page,
        per_page=per_page,
        title="Manage Posts",
    )


@bp.route("/new", methods=["GET", "POST"])
@limiter.limit(_write_limit, methods=["POST"])
def post_new():
    """HTML form to create a new post"""
    form = NewPostForm()
    errors = None
    if request.method == "POST":
        location, errors = create_post_from_fields(parse_post_fields(request.form))
        if location:
            flash(f'Post "{form.title.data}" created.', "success")
            return redirect(location)

    return render_template("admin/post_new.html", form=form, errors=errors, title="New Post")


@bp.route("/<string:slug>", methods=["GET", "POST"])
@limiter.limit(_write_limit, methods=["POST"])
def post_edit(slug: str):
    """Edit or delete a single post.

    POST bodies carry ``_action``: ``create`` saves the edit form, ``delete``
    removes the post. Both redirect to the admin listing; a failed edit
    re-renders this page with the messages next to their fields.
    """
    errors = None
    if request.method == "POST":
        try:
            action = parse_post_action(request.form)
        except InvalidActionError as e:
            abort(400, description=str(e))
        location, errors = handle_action(action)
        if location:
            flash("Post updated." if isinstance(action, UpdatePostAction) else "Post deleted.", "success")
            return redirect(location)

    post = load_post(slug)
    form = EditPostForm(obj=post)
    delete_form = DeletePostForm(formdata=None, slug=post.slug)
    return render_template(
        "admin/post_edit.html",
        post=post,
        form=form,
        delete_form=delete_form,
        errors=errors,
        title=f"Edit: {post.title}",
        page_scripts=["js/admin_post_form.js"],
    )
