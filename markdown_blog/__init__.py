from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import click
import structlog
from flask import Flask, jsonify, g, request

from markdown_blog.config import Config
from markdown_blog.extensions import (
    db,
    migrate,
    csrf,
    limiter,
    cache,
)
from markdown_blog.logging_config import configure_logging
from markdown_blog.security import apply_security_headers
from markdown_blog.models.post import Post  # noqa: F401  ensure models imported for migrations
from markdown_blog.utils.invariant import InvariantError
from markdown_blog.utils.markdown import pygments_css


def create_app(config_overrides: Dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # Load config
    app.config.from_object(Config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging()
    log = structlog.get_logger()

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    cache.init_app(app)
    limiter.init_app(app)

    @app.context_processor
    def template_context() -> dict:
        return {
            "site_name": app.config.get("SITE_NAME"),
            "page_scripts": [],
            "script_nonce": getattr(g, "script_nonce", ""),
        }

    # Request context enrichment for logging and CSP nonces
    @app.before_request
    def add_request_context() -> None:
        g.request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()
        g.script_nonce = os.urandom(16).hex()

    @app.after_request
    def set_headers(resp):
        return apply_security_headers(resp)

    # Blueprints
    from markdown_blog.blueprints.blog import bp as blog_bp
    from markdown_blog.blueprints.admin import bp as admin_bp

    app.register_blueprint(blog_bp)
    app.register_blueprint(admin_bp, url_prefix="/posts/admin")

    @app.get("/health")
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
            db_ok = "connected"
        except Exception:
            log.exception("health_db_check_failed")
            db_ok = "error"
        return jsonify({"status": "ok", "db": db_ok}), 200

    @app.get("/codehilite.css")
    def codehilite_css():
        return pygments_css(), 200, {"Content-Type": "text/css; charset=utf-8"}

    @app.errorhandler(InvariantError)
    def invariant_violation(e: InvariantError):
        log.error("invariant_violation", message=str(e), path=request.path)
        return jsonify({"error": "invariant_violation", "message": str(e)}), 500

    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"error": "bad_request", "message": getattr(e, "description", str(e))}), 400

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": "resource not found"}), 404

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({"error": "rate_limited", "message": "too many requests"}), 429

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"error": "server_error", "message": "internal server error"}), 500

    # CLI: create a post from a markdown file
    @app.cli.command("create-post")
    @click.option("--slug", required=True)
    @click.option("--title", required=True)
    @click.option("--markdown-file", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
    def create_post_command(slug: str, title: str, markdown_file: Path) -> None:
        from markdown_blog.schemas.posts import parse_post_fields
        from markdown_blog.services.post_admin import create_post_from_fields

        fields = parse_post_fields({
            "title": title,
            "slug": slug,
            "markdown": markdown_file.read_text(encoding="utf-8"),
        })
        _, errors = create_post_from_fields(fields)
        if errors is not None:
            for name, message in errors.model_dump(exclude_none=True).items():
                click.echo(f"{name}: {message}", err=True)
            raise click.exceptions.Exit(1)
        click.echo(f"Post {slug!r} created")

    return app
